# export_txt.py
# Relatório em texto da calculadora de sapateiras

import logging
from datetime import date

logger = logging.getLogger(__name__)

REPORT_FILENAME = "sapateira-resultado.txt"


def _raw(value):
    return "" if value is None else str(value)


def shoe_rack_report(inp, cut_list, today=None):
    """
    Monta o relatório com as medidas informadas e as medidas de corte.
    Os campos de entrada aparecem como foram digitados.
    """
    today = today or date.today()
    fb = cut_list.front_back
    side = cut_list.side

    return (
        "CALCULADORA DE SAPATEIRA - RESULTADOS\n"
        "========================================\n"
        f"Data: {today.strftime('%d/%m/%Y')}\n"
        "\n"
        "MEDIDAS INFORMADAS:\n"
        f"- Largura do Vão: {_raw(inp.width)} cm\n"
        f"- Altura do Vão: {_raw(inp.opening_height)} cm\n"
        f"- Profundidade: {_raw(inp.depth)} cm\n"
        f"- Quantidade de Sapateiras: {_raw(inp.count)}\n"
        f"- Altura da Lateral: {_raw(inp.side_height)} cm\n"
        f"- Tamanho Corrediça: {inp.slide_size} cm\n"
        f"- Tipo Corrediça: {inp.slide_type.value}\n"
        "\n"
        "MEDIDAS DE CORTE:\n"
        f"Frente e Traseira ({fb.quantity} peças):\n"
        f"- Largura: {fb.width:.1f} cm\n"
        f"- Altura: {fb.height:.1f} cm\n"
        "\n"
        f"Laterais ({side.quantity} peças):\n"
        f"- Profundidade: {side.width:.1f} cm\n"
        f"- Altura: {side.height:.1f} cm\n"
    )


def export_txt(inp, cut_list, today=None):
    """Relatório codificado em UTF-8, pronto para download."""
    content = shoe_rack_report(inp, cut_list, today=today)
    logger.info("Relatório de sapateira gerado (%d peças)", cut_list.front_back.quantity + cut_list.side.quantity)
    return content.encode("utf-8")
