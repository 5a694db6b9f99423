"""In-memory release archives for tests."""

from __future__ import annotations

import io
import stat
import zipfile


def zip_bytes(entries: dict[str, bytes | None], *, mode: int = 0o755) -> bytes:
    """Build a zip. A ``None`` value makes ``name`` a directory entry."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name, data in entries.items():
            info = zipfile.ZipInfo(name)
            if data is None:
                info.external_attr = (stat.S_IFDIR | 0o755) << 16
                zf.writestr(info, b"")
            else:
                info.external_attr = (stat.S_IFREG | mode) << 16
                info.compress_type = zipfile.ZIP_DEFLATED
                zf.writestr(info, data)
    return buf.getvalue()


def symlink_zip(name: str, target: str) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        info = zipfile.ZipInfo(name)
        info.external_attr = (stat.S_IFLNK | 0o777) << 16
        zf.writestr(info, target)
    return buf.getvalue()


def tool_zip(executable: str, version: str = "") -> bytes:
    """A release archive holding a single executable."""
    script = f"#!/bin/sh\necho '{executable} v{version}'\n".encode()
    return zip_bytes({executable: script})


def listing_html(tool: str, versions: list[str]) -> str:
    """Index page shaped like the release server's."""
    rows = ['<li><a href="../">../</a></li>']
    rows += [f'<li><a href="/{tool}/{v}/">{tool}_{v}</a></li>' for v in versions]
    rows.append('<li><a href="https://fastly.com/?utm_source=hashicorp">Fastly</a></li>')
    body = "\n".join(rows)
    return f"<!DOCTYPE html><html><body><ul>\n{body}\n</ul></body></html>"
