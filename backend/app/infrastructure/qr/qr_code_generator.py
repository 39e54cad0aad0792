"""QR code rendering for share links."""

import base64
import io
import logging

import qrcode
from qrcode.exceptions import DataOverflowError

logger = logging.getLogger(__name__)


def generate_qr_code_data_url(data: str) -> str | None:
    """Render ``data`` as a PNG QR code and return it as a base64 data URL.

    Returns None when the data does not fit in the largest QR version at
    high error correction (long portable links can exceed it).
    """
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_H,
        box_size=10,
        border=2,
    )
    qr.add_data(data)
    try:
        qr.make(fit=True)
    except DataOverflowError:
        logger.warning("QR payload of %d chars is too large to encode", len(data))
        return None
    img = qr.make_image(fill_color="black", back_color="white")

    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return f"data:image/png;base64,{base64.b64encode(buffer.getvalue()).decode()}"
