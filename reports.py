import io
from reportlab.lib.pagesizes import letter
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet


NAME_MAX_CHARS = 40
EMAIL_MAX_CHARS = 48


def _truncate(value, limit):
    """Shorten value so it fits its fixed-width table column."""
    value = value or ''
    if len(value) > limit:
        return value[:limit - 3] + "..."
    return value


def create_users_pdf(users, title="Users Report"):
    """Create PDF bytes listing the given users (ReportLab)."""
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=letter, leftMargin=36, rightMargin=36, topMargin=36, bottomMargin=36)
    styles = getSampleStyleSheet()
    elements = []

    elements.append(Paragraph(title, styles['Title']))
    elements.append(Spacer(1, 12))

    data = [["Id", "Name", "Email"]]
    for u in users:
        data.append([str(u.id), _truncate(u.name, NAME_MAX_CHARS), _truncate(u.email, EMAIL_MAX_CHARS)])

    table = Table(data, colWidths=[50, 220, 270])
    table.setStyle(TableStyle([
        ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#2c3e50')),  # header background
        ('TEXTCOLOR', (0, 0), (-1, 0), colors.white),
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('ALIGN', (0, 1), (0, -1), 'CENTER'),
        ('VALIGN', (0, 0), (-1, -1), 'TOP'),
        ('INNERGRID', (0,0), (-1,-1), 0.25, colors.gray),
        ('BOX', (0,0), (-1,-1), 0.25, colors.gray),
        ('ROWBACKGROUNDS', (0,1), (-1,-1), [colors.white, colors.HexColor('#f7fafc')]),
    ]))

    elements.append(table)
    doc.build(elements)
    buffer.seek(0)
    return buffer.getvalue()
