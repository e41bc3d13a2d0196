"""Media kinds of inscription content and content types for files."""

from __future__ import annotations

import struct
from enum import Enum
from pathlib import Path


class Media(Enum):
    AUDIO = "audio"
    IFRAME = "iframe"
    IMAGE = "image"
    PDF = "pdf"
    TEXT = "text"
    UNKNOWN = "unknown"
    VIDEO = "video"

    @classmethod
    def parse(cls, content_type: str) -> Media:
        for entry_type, media, _ in TABLE:
            if entry_type == content_type:
                return media
        raise ValueError(f"unknown content type: {content_type}")


TABLE: tuple[tuple[str, Media, tuple[str, ...]], ...] = (
    ("application/json", Media.TEXT, ("json",)),
    ("application/pdf", Media.PDF, ("pdf",)),
    ("application/pgp-signature", Media.TEXT, ("asc",)),
    ("application/yaml", Media.TEXT, ("yaml", "yml")),
    ("audio/flac", Media.AUDIO, ("flac",)),
    ("audio/mpeg", Media.AUDIO, ("mp3",)),
    ("audio/wav", Media.AUDIO, ("wav",)),
    ("image/apng", Media.IMAGE, ("apng",)),
    ("image/avif", Media.IMAGE, ()),
    ("image/gif", Media.IMAGE, ("gif",)),
    ("image/jpeg", Media.IMAGE, ("jpg", "jpeg")),
    ("image/png", Media.IMAGE, ("png",)),
    ("image/svg+xml", Media.IFRAME, ("svg",)),
    ("image/webp", Media.IMAGE, ("webp",)),
    ("model/gltf-binary", Media.UNKNOWN, ("glb",)),
    ("model/stl", Media.UNKNOWN, ("stl",)),
    ("text/css", Media.TEXT, ("css",)),
    ("text/html;charset=utf-8", Media.IFRAME, ("html",)),
    ("text/javascript", Media.TEXT, ("js",)),
    ("text/plain;charset=utf-8", Media.TEXT, ("txt",)),
    ("text/plain", Media.TEXT, ("txt",)),
    ("text/markdown;charset=utf-8", Media.TEXT, ("md",)),
    ("video/mp4", Media.VIDEO, ("mp4",)),
    ("video/webm", Media.VIDEO, ("webm",)),
)


def content_type_for_path(path: str | Path) -> str:
    """Content type for a file, chosen by its extension."""
    path = Path(path)
    stem, dot, extension = path.name.rpartition(".")
    if not dot or not stem:
        raise ValueError("file must have extension")
    extension = extension.lower()

    if extension == "mp4":
        check_mp4_codec(path)

    for content_type, _, extensions in TABLE:
        if extension in extensions:
            return content_type

    supported = sorted(exts[0] for _, _, exts in TABLE if exts)
    raise ValueError(
        f"unsupported file extension `.{extension}`, supported extensions: {' '.join(supported)}"
    )


def _boxes(data: bytes):
    """Yield (type, payload) for each box in an MP4 byte range."""
    pos = 0
    while pos < len(data):
        if len(data) - pos < 8:
            raise ValueError("truncated mp4 box header")
        size, kind = struct.unpack(">I4s", data[pos : pos + 8])
        header = 8
        if size == 1:
            if len(data) - pos < 16:
                raise ValueError("truncated mp4 box header")
            (size,) = struct.unpack(">Q", data[pos + 8 : pos + 16])
            header = 16
        elif size == 0:
            size = len(data) - pos
        if size < header or pos + size > len(data):
            raise ValueError("invalid mp4 box size")
        yield kind.decode("latin-1"), data[pos + header : pos + size]
        pos += size


def _child(data: bytes, name: str) -> bytes | None:
    return next((payload for kind, payload in _boxes(data) if kind == name), None)


def check_mp4_codec(path: str | Path) -> None:
    """Raise ValueError unless every video track in the MP4 file is H.264."""
    data = Path(path).read_bytes()
    moov = _child(data, "moov")
    if moov is None:
        raise ValueError("moov not found in mp4")
    for kind, trak in _boxes(moov):
        if kind != "trak":
            continue
        mdia = _child(trak, "mdia")
        if mdia is None:
            raise ValueError("mdia not found in track")
        hdlr = _child(mdia, "hdlr")
        if hdlr is None or len(hdlr) < 12:
            raise ValueError("hdlr not found in track")
        if hdlr[8:12] != b"vide":
            continue
        minf = _child(mdia, "minf")
        stbl = _child(minf, "stbl") if minf is not None else None
        stsd = _child(stbl, "stsd") if stbl is not None else None
        if stsd is None or len(stsd) < 16:
            raise ValueError("stsd not found in video track")
        media_type = stsd[12:16].decode("latin-1")
        if media_type != "avc1":
            raise ValueError(
                f"Unsupported video codec, only H.264 is supported in MP4: {media_type}"
            )