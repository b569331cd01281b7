from __future__ import annotations

import base64
import io

import qrcode


def render_qr_png(data: str) -> bytes:
    img = qrcode.make(data)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def render_qr_data_url(data: str) -> str:
    """Encode ``data`` as a QR code and return it as a PNG data URL."""
    qr_b64 = base64.b64encode(render_qr_png(data)).decode("utf-8")
    return f"data:image/png;base64,{qr_b64}"
