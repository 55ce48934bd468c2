# export_pdf.py
# Relatório da sapateira em PDF

import io
import logging
from datetime import date

from reportlab.platypus import SimpleDocTemplate, Table, Paragraph, Spacer
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.pagesizes import A4

logger = logging.getLogger(__name__)

REPORT_FILENAME = "sapateira-resultado.pdf"


def export_pdf(inp, cut_list, filepath, today=None):
    """
    Cria o PDF com as medidas informadas e a lista de corte.
    `filepath` pode ser um caminho ou um buffer binário.
    """
    today = today or date.today()
    styles = getSampleStyleSheet()
    doc = SimpleDocTemplate(filepath, pagesize=A4)

    elements = []

    # Título
    elements.append(Paragraph("Calculadora de Sapateira – resultados", styles["Title"]))
    elements.append(Paragraph(f"Data: {today.strftime('%d/%m/%Y')}", styles["Normal"]))
    elements.append(Spacer(1, 12))

    # Medidas informadas
    elements.append(Paragraph("Medidas informadas", styles["Heading2"]))
    informed = [
        ["Largura do Vão [cm]", inp.width or ""],
        ["Altura do Vão [cm]", inp.opening_height or ""],
        ["Profundidade [cm]", inp.depth or ""],
        ["Quantidade de Sapateiras", inp.count],
        ["Altura da Lateral [cm]", inp.side_height],
        ["Tamanho Corrediça [cm]", inp.slide_size],
        ["Tipo Corrediça", inp.slide_type.value],
    ]
    elements.append(Table([[str(a), str(b)] for a, b in informed]))
    elements.append(Spacer(1, 12))

    # Lista de corte
    elements.append(Paragraph("Medidas de corte", styles["Heading2"]))
    data = [["Peça", "Largura [cm]", "Altura [cm]", "Quantidade"]]
    for name, panel in (("Frente e Traseira", cut_list.front_back), ("Laterais", cut_list.side)):
        data.append([name, f"{panel.width:.1f}", f"{panel.height:.1f}", str(panel.quantity)])

    table = Table(data, repeatRows=1)
    elements.append(table)

    doc.build(elements)
    logger.info("PDF de sapateira gerado")


def pdf_bytes(inp, cut_list, today=None):
    buffer = io.BytesIO()
    export_pdf(inp, cut_list, buffer, today=today)
    return buffer.getvalue()
