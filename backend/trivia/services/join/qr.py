import base64
import io
import logging
from typing import Optional

import qrcode

logger = logging.getLogger(__name__)


def build_qr_data_url(data: str, box_size: int = 8, border: int = 2,
                      fill_color: str = 'black', back_color: str = 'white') -> Optional[str]:
    """Render ``data`` as a PNG QR code data URL, or ``None`` if rendering fails."""
    try:
        qr = qrcode.QRCode(border=border, box_size=box_size)
        qr.add_data(data)
        qr.make(fit=True)
        img = qr.make_image(fill_color=fill_color, back_color=back_color)
        buffer = io.BytesIO()
        img.save(buffer, format='PNG')
        encoded = base64.b64encode(buffer.getvalue()).decode('ascii')
        return f'data:image/png;base64,{encoded}'
    except Exception as exc:
        logger.warning(f"[qr] could not render join code: {exc}")
        return None
