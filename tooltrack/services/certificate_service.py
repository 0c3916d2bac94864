import io
import logging
import os
import unicodedata
from datetime import date
import qrcode
from qrcode.image.pil import PilImage
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas
from tooltrack.schemas.assignment import AssignmentErrorCode
from tooltrack.schemas.certificate import CertificateFailure, CertificateResult, CertificateSuccess
from tooltrack.schemas.employee import Employee
from tooltrack.schemas.tool import Tool, CalibrationStatus
from tooltrack.services.calibration import calibration_status
from tooltrack.services.data_store import DataStore
from tooltrack.services.latency import Latency

logger = logging.getLogger(__name__)


# ── Font registration (Unicode names on the certificate) ─────────────────────
_FONT_REGULAR = "Helvetica"
_FONT_BOLD = "Helvetica-Bold"
_UNICODE_CAPABLE = False

_FONT_PAIRS = [
    (
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
        "CertDejaVu", "CertDejaVuBold",
    ),
    (
        "/usr/share/fonts/ttf-dejavu/DejaVuSans.ttf",
        "/usr/share/fonts/ttf-dejavu/DejaVuSans-Bold.ttf",
        "CertDejaVu", "CertDejaVuBold",
    ),
    (
        "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
        "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
        "CertLiberation", "CertLiberationBold",
    ),
]


def _init_fonts() -> None:
    global _FONT_REGULAR, _FONT_BOLD, _UNICODE_CAPABLE
    for reg_path, bold_path, reg_name, bold_name in _FONT_PAIRS:
        if not os.path.exists(reg_path):
            continue
        try:
            pdfmetrics.registerFont(TTFont(reg_name, reg_path))
            _FONT_REGULAR = reg_name
            if os.path.exists(bold_path):
                pdfmetrics.registerFont(TTFont(bold_name, bold_path))
                _FONT_BOLD = bold_name
            else:
                _FONT_BOLD = reg_name
            _UNICODE_CAPABLE = True
            break
        except Exception:
            logger.warning("Could not register certificate font %s", reg_path, exc_info=True)
            continue
    if not _UNICODE_CAPABLE:
        logger.warning("No TrueType font found, certificates fall back to Helvetica (Latin-1 only)")


_init_fonts()


def _t(text: str) -> str:
    """Text safe for the active font; strips accents when only Helvetica is available."""
    if _UNICODE_CAPABLE:
        return text
    decomposed = unicodedata.normalize("NFKD", text)
    return decomposed.encode("latin-1", "ignore").decode("latin-1")


def _make_qr_bytes(url: str) -> bytes:
    qr = qrcode.QRCode(version=1, box_size=10, border=4)
    qr.add_data(url)
    qr.make(fit=True)
    img: PilImage = qr.make_image(fill_color="black", back_color="white")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def certificate_filename(tool: Tool) -> str:
    return f"Calibration_Certificate_{tool.id}_{tool.calibration_due_date.isoformat()}.pdf"


def render_certificate_pdf(
    tool: Tool,
    employee: Employee | None,
    status: CalibrationStatus,
    issued_on: date,
    issuer: str,
    base_url: str,
) -> bytes:
    """Single A4 page: header bar, tool details, QR code linking to the tool."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.setTitle(f"Calibration Certificate {tool.id}")
    c.setAuthor(issuer)
    page_width, page_height = A4
    margin = 20 * mm

    header_h = 22 * mm
    c.setFillColor(colors.HexColor("#001628"))
    c.rect(0, page_height - header_h, page_width, header_h, fill=True, stroke=False)
    c.setFillColor(colors.white)
    c.setFont(_FONT_BOLD, 18)
    c.drawString(margin, page_height - 14 * mm, "CALIBRATION CERTIFICATE")

    rows = [
        ("Tool ID", tool.id),
        ("Tool Type", tool.type.value),
        ("Model", tool.model),
        ("Serial Number", tool.serial_number),
        ("Calibration Due Date", tool.calibration_due_date.isoformat()),
        ("Calibration Status", status.label),
        ("Assigned To", employee.name if employee else "Unassigned"),
    ]
    c.setFillColor(colors.black)
    y = page_height - header_h - 20 * mm
    for label, value in rows:
        c.setFont(_FONT_BOLD, 11)
        c.drawString(margin, y, _t(f"{label}:"))
        c.setFont(_FONT_REGULAR, 11)
        c.drawString(margin + 50 * mm, y, _t(value))
        y -= 8 * mm

    y -= 6 * mm
    c.setFont(_FONT_REGULAR, 10)
    c.drawString(margin, y, "This certificate confirms that the above tool has been calibrated")
    c.drawString(margin, y - 5 * mm, "according to applicable standards and procedures.")

    qr_size = 35 * mm
    qr_png = _make_qr_bytes(f"{base_url.rstrip('/')}/api/tools/{tool.id}")
    c.drawImage(
        ImageReader(io.BytesIO(qr_png)),
        page_width - margin - qr_size, page_height - header_h - 10 * mm - qr_size,
        width=qr_size, height=qr_size,
    )

    c.setStrokeColor(colors.HexColor("#00aff0"))
    c.setLineWidth(0.8)
    c.line(margin, 30 * mm, page_width - margin, 30 * mm)
    c.setFont(_FONT_REGULAR, 9)
    c.drawString(margin, 24 * mm, _t(f"Issued by: {issuer}"))
    c.drawString(margin, 19 * mm, f"Generated on: {issued_on.isoformat()}")

    c.showPage()
    c.save()
    return buf.getvalue()


class CertificateService:
    def __init__(self, store: DataStore, latency: Latency, issuer: str, base_url: str):
        self._store = store
        self._latency = latency
        self._issuer = issuer
        self._base_url = base_url

    async def download_calibration_certificate(self, tool_id: str) -> CertificateResult:
        await self._latency.wait()
        tool = self._store.tool_by_id(tool_id)
        if tool is None:
            return CertificateFailure(
                error=f"Tool with ID {tool_id} does not exist.",
                code=AssignmentErrorCode.tool_not_found,
            )

        employee = self._store.employee_by_id(tool.assigned_to) if tool.assigned_to else None
        today = self._store.today()
        document = render_certificate_pdf(
            tool, employee, calibration_status(tool, today), today, self._issuer, self._base_url,
        )
        logger.info("Generated calibration certificate for %s (%d bytes)", tool_id, len(document))
        return CertificateSuccess(document=document, filename=certificate_filename(tool))
