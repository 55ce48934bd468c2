import logging
import sys
from functools import partial

import pandas as pd
import streamlit as st

from constants import (
    APP_TITLE,
    APP_SUBTITLE,
    APP_ICON,
    LOG_LEVEL,
    SLIDE_SIZES,
    MDF_THICKNESSES,
    ALTURA_LATERAL_PADRAO,
    MAX_ITENS_DESENHO,
)
from drawings import draw_drawer_front, draw_shoe_rack_stack, draw_slat_layout, draw_shelf_stack
from error_boundary import error_boundary
from export_pdf import pdf_bytes, REPORT_FILENAME as PDF_FILENAME
from export_txt import export_txt, REPORT_FILENAME as TXT_FILENAME
from model import (
    SlideType,
    MaterialType,
    DrawerInput,
    ShoeRackInput,
    SlatInput,
    BaseboardInput,
    ShelfInput,
    compute_drawer,
    compute_shoe_rack,
    compute_slat,
    compute_baseboard,
    compute_shelf,
    drawer_deduction,
    drawer_summary,
    shoe_rack_summary,
    shoe_rack_deduction,
)
from validation import parse_number, parse_count

logging.basicConfig(
    stream=sys.stdout,
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="[%(levelname)s] %(name)s: %(message)s",
)

st.set_page_config(page_title=APP_TITLE, page_icon=APP_ICON, layout="centered")

# ==========================================
# 0. VALORES INICIAIS / RESET
# ==========================================

DEFAULTS = {
    "gav": {
        "gav_largura": "", "gav_altura": "", "gav_profundidade": "", "gav_qtd": 1,
        "gav_corredica": 35, "gav_tipo": SlideType.HIDDEN, "gav_rebaixo": False, "gav_canoa": False,
    },
    "sap": {
        "sap_largura": "", "sap_altura": "", "sap_profundidade": "", "sap_qtd": 1,
        "sap_lateral": f"{ALTURA_LATERAL_PADRAO:g}", "sap_corredica": 35, "sap_tipo": SlideType.HIDDEN,
    },
    "rip": {"rip_total": "", "rip_qtd": "", "rip_largura": "", "rip_emenda": False},
    "rod": {"rod_profundidade": "", "rod_comprimento": "", "rod_material": MaterialType.MDF, "rod_parede": False},
    "pra": {
        "pra_profundidade": "", "pra_largura": "", "pra_altura": "", "pra_espessura": 15,
        "pra_qtd": "", "pra_engrossada": False,
    },
}

SLIDE_LABELS = {SlideType.HIDDEN: "Oculta", SlideType.TELESCOPIC: "Telescópica"}
MATERIAL_LABELS = {MaterialType.MDF: "MDF", MaterialType.WOOD: "Madeira"}


def reset_calculator(prefix):
    for k, v in DEFAULTS[prefix].items():
        st.session_state[k] = v


def reset_all():
    for prefix in DEFAULTS:
        reset_calculator(prefix)


for _prefix, _values in DEFAULTS.items():
    for _k, _v in _values.items():
        if _k not in st.session_state:
            st.session_state[_k] = _v


def cut_list_frame(cut_list, side_label="Profundidade × Altura"):
    fb, side = cut_list.front_back, cut_list.side
    return pd.DataFrame(
        [
            {"Peça": "Frente e Traseira", "Largura [cm]": round(fb.width, 1),
             "Altura [cm]": round(fb.height, 1), "Quantidade": fb.quantity, "Medida": "Largura × Altura"},
            {"Peça": "Laterais", "Largura [cm]": round(side.width, 1),
             "Altura [cm]": round(side.height, 1), "Quantidade": side.quantity, "Medida": side_label},
        ]
    )


def reset_button(prefix):
    st.button("🗑️ Limpar", key=f"{prefix}_reset", on_click=partial(reset_calculator, prefix))


# ==========================================
# 1. GAVETAS
# ==========================================

def _on_drawer_type_change():
    # Rebaixo só funciona com corrediça oculta
    if st.session_state["gav_tipo"] != SlideType.HIDDEN:
        st.session_state["gav_rebaixo"] = False


def render_drawers():
    st.subheader("📐 Medidas do Vão")
    c1, c2 = st.columns(2)
    c1.text_input("Largura do Vão (cm)", placeholder="Ex: 50", key="gav_largura")
    c2.text_input("Altura do Vão (cm)", placeholder="Ex: 15", key="gav_altura")
    c1, c2 = st.columns(2)
    c1.text_input("Profundidade (cm)", placeholder="Ex: 40", key="gav_profundidade")
    c2.number_input("Quantidade de Gavetas", min_value=1, step=1, key="gav_qtd")

    st.radio("Tamanho da Corrediça (cm)", SLIDE_SIZES, horizontal=True, key="gav_corredica")
    st.radio(
        "Tipo de Corrediça",
        list(SlideType),
        format_func=SLIDE_LABELS.get,
        horizontal=True,
        key="gav_tipo",
        on_change=_on_drawer_type_change,
    )
    st.caption(
        f"Desconto: {drawer_deduction(st.session_state['gav_tipo'], st.session_state.get('gav_rebaixo', False)):g}cm"
    )
    if st.session_state["gav_tipo"] == SlideType.HIDDEN:
        st.checkbox("Gaveta com Rebaixo", key="gav_rebaixo")
    st.checkbox("Puxador Canoa (-2cm altura)", key="gav_canoa")
    reset_button("gav")

    inp = DrawerInput(
        width=st.session_state["gav_largura"],
        height=st.session_state["gav_altura"],
        depth=st.session_state["gav_profundidade"],
        slide_size=st.session_state["gav_corredica"],
        slide_type=st.session_state["gav_tipo"],
        recessed=st.session_state.get("gav_rebaixo", False),
        canoe_handle=st.session_state["gav_canoa"],
        count=st.session_state["gav_qtd"],
    )
    result = compute_drawer(inp)
    if result is None:
        return

    st.subheader("📦 Medidas de Corte")
    c1, c2 = st.columns(2)
    c1.metric(
        f"Frente e Traseira ({result.front_back.quantity} peças)",
        f"{result.front_back.width:.1f} × {result.front_back.height:.1f} cm",
    )
    c2.metric(
        f"Laterais ({result.side.quantity} peças)",
        f"{result.side.width:.1f} × {result.side.height:.1f} cm",
    )
    st.dataframe(cut_list_frame(result), use_container_width=True, hide_index=True)
    st.info(f"**Resumo:** {drawer_summary(inp)}")

    width, height, count = parse_number(inp.width), parse_number(inp.height), parse_count(inp.count)
    if width > 0 and result.side.height > 0 and count <= MAX_ITENS_DESENHO:
        with st.expander("Vista frontal"):
            st.pyplot(draw_drawer_front(width, height, result, count))


# ==========================================
# 2. SAPATEIRAS
# ==========================================

def render_shoe_racks():
    st.subheader("📐 Medidas do Vão")
    c1, c2 = st.columns(2)
    c1.text_input("Largura do Vão (cm)", placeholder="Ex: 50", key="sap_largura")
    c2.text_input("Altura do Vão (cm)", placeholder="Ex: 15", key="sap_altura")
    c1, c2 = st.columns(2)
    c1.text_input("Profundidade (cm)", placeholder="Ex: 40", key="sap_profundidade")
    c2.text_input("Altura da Lateral (cm)", placeholder="Ex: 6", key="sap_lateral")
    st.number_input("Quantidade de Sapateiras", min_value=1, step=1, key="sap_qtd")

    st.radio("Tamanho da Corrediça (cm)", SLIDE_SIZES, horizontal=True, key="sap_corredica")
    st.radio(
        "Tipo de Corrediça",
        list(SlideType),
        format_func=lambda t: f"{SLIDE_LABELS[t]} (desconto: {shoe_rack_deduction(t):g}cm)",
        horizontal=True,
        key="sap_tipo",
    )
    reset_button("sap")

    inp = ShoeRackInput(
        width=st.session_state["sap_largura"],
        side_height=st.session_state["sap_lateral"],
        opening_height=st.session_state["sap_altura"],
        depth=st.session_state["sap_profundidade"],
        slide_size=st.session_state["sap_corredica"],
        slide_type=st.session_state["sap_tipo"],
        count=st.session_state["sap_qtd"],
    )
    result = compute_shoe_rack(inp)
    if result is None:
        return

    st.subheader("📦 Medidas de Corte")
    c1, c2 = st.columns(2)
    c1.metric(
        f"Frente e Traseira ({result.front_back.quantity} peças)",
        f"{result.front_back.width:.1f} × {result.front_back.height:.1f} cm",
    )
    c2.metric(
        f"Laterais ({result.side.quantity} peças)",
        f"{result.side.width:.1f} × {result.side.height:.1f} cm",
    )
    st.dataframe(cut_list_frame(result), use_container_width=True, hide_index=True)

    count = parse_count(inp.count)
    with st.expander("Distribuição Visual"):
        if count <= MAX_ITENS_DESENHO:
            st.pyplot(draw_shoe_rack_stack(result, count))
        plural = "s" if count > 1 else ""
        st.caption(f"{count} sapateira{plural} de {result.side.height:.1f}cm cada")
    st.info(f"**Resumo:** {shoe_rack_summary(inp)}")

    c1, c2 = st.columns(2)
    if c1.download_button(
        "⬇️ Baixar Resultados", export_txt(inp, result), file_name=TXT_FILENAME, mime="text/plain"
    ):
        st.toast("Arquivo baixado com sucesso!")
    c2.download_button("⬇️ Baixar PDF", pdf_bytes(inp, result), file_name=PDF_FILENAME, mime="application/pdf")


# ==========================================
# 3. RIPADOS
# ==========================================

def render_slats():
    st.subheader("🪵 Dados do Ripado")
    st.text_input("Tamanho Total da Peça (cm)", placeholder="Ex: 155", key="rip_total")
    c1, c2 = st.columns(2)
    c1.text_input("Quantidade de Ripados", placeholder="Ex: 4", key="rip_qtd")
    c2.text_input("Largura de Cada Ripado (cm)", placeholder="Ex: 3", key="rip_largura")
    st.toggle(
        "Emenda de Ripado",
        help="Última ripa fica metade para fora para emendar com outra peça",
        key="rip_emenda",
    )

    note = (
        "**Como funciona:** O ripado começa em um lado da peça e termina no outro. "
        "Os vãos entre os ripados são calculados para ficarem todos iguais."
    )
    if st.session_state["rip_emenda"]:
        note += (
            "\n\n**Emenda ativada:** A última ripa terá metade da largura para dentro da peça "
            "e metade para fora, facilitando a continuação em outra peça."
        )
    st.caption(note)
    reset_button("rip")

    inp = SlatInput(
        total=st.session_state["rip_total"],
        count=st.session_state["rip_qtd"],
        slat_width=st.session_state["rip_largura"],
        splice=st.session_state["rip_emenda"],
    )
    result = compute_slat(inp)
    if result is None:
        return

    if result.exceeds_length:
        st.error(
            "⚠️ Os ripados excedem o tamanho total da peça. "
            "Reduza a quantidade ou a largura dos ripados."
        )

    title = "📦 Resultado do Cálculo" + (" (Com Emenda)" if result.splice else "")
    st.subheader(title)
    st.metric("Largura de Cada Vão", f"{result.gap_width:.2f} cm", f"{result.gap_count} vãos iguais", delta_color="off")
    c1, c2 = st.columns(2)
    c1.metric("Ripados ocupam", f"{result.occupied:.1f} cm")
    if result.splice:
        c1.caption(f"(última ripa: {result.inner_half:.1f}cm dentro)")
    c2.metric("Sobra para vãos", f"{result.remaining:.1f} cm")
    if result.exceeds_length:
        return

    total = parse_number(inp.total)
    count = parse_count(inp.count)
    if total > 0 and count <= MAX_ITENS_DESENHO:
        with st.expander("Distribuição Visual"):
            st.pyplot(draw_slat_layout(total, count, result))

    summary = (
        f"Em uma peça de {total:g}cm, {count} ripados de {result.slat_width:g}cm cada, "
        f"com {result.gap_count} vãos de {result.gap_width:.2f}cm entre eles."
    )
    if result.splice:
        summary += (
            f" A última ripa tem {result.inner_half:.1f}cm para dentro e "
            f"{result.inner_half:.1f}cm para fora, pronta para emenda."
        )
    st.info(f"**Resumo:** {summary}")


# ==========================================
# 4. RODAPÉ
# ==========================================

def _on_material_change():
    if st.session_state["rod_material"] == MaterialType.MDF:
        st.session_state["rod_parede"] = False


def render_baseboard():
    st.subheader("📏 Calculadora de Rodapé")
    st.selectbox(
        "Tipo de Material",
        list(MaterialType),
        format_func=MATERIAL_LABELS.get,
        key="rod_material",
        on_change=_on_material_change,
    )

    material = st.session_state["rod_material"]
    wall = st.session_state.get("rod_parede", False)
    if material == MaterialType.MDF:
        hint = "Desconto de 8,5 cm para MDF"
    elif wall:
        hint = "Desconto de 8 cm (7 cm + 1 cm para parede)"
    else:
        hint = "Desconto de 7 cm para madeira"
    st.text_input("Profundidade do Móvel (cm)", placeholder="Ex: 60", key="rod_profundidade")
    st.caption(hint)
    st.text_input("Comprimento do Móvel (cm)", placeholder="Ex: 120", key="rod_comprimento")
    st.caption("Desconto de 3 mm de cada lado (total 6 mm)")
    if material == MaterialType.WOOD:
        st.toggle("Rodapé de Parede", key="rod_parede")
    reset_button("rod")

    inp = BaseboardInput(
        depth=st.session_state["rod_profundidade"],
        length=st.session_state["rod_comprimento"],
        material=material,
        wall=st.session_state.get("rod_parede", False),
    )
    result = compute_baseboard(inp)
    if result is None:
        return

    st.subheader("Medidas do Rodapé:")
    c1, c2 = st.columns(2)
    if result.depth is not None:
        c1.metric("Profundidade", f"{result.depth:.1f} cm")
    if result.length is not None:
        c2.metric("Comprimento", f"{result.length:.1f} cm")


# ==========================================
# 5. PRATELEIRAS
# ==========================================

def render_shelves():
    st.subheader("📏 Dados do Móvel")
    c1, c2 = st.columns(2)
    c1.text_input("Profundidade (cm)", placeholder="Ex: 50", key="pra_profundidade")
    c2.text_input("Largura (cm)", placeholder="Ex: 80", key="pra_largura")
    c1, c2 = st.columns(2)
    c1.text_input("Altura do Vão (cm)", placeholder="Ex: 200", key="pra_altura")
    c2.text_input("Qtd. Prateleiras", placeholder="Ex: 10", key="pra_qtd")
    st.radio("Espessura do MDF", MDF_THICKNESSES, format_func=lambda t: f"{t} mm", horizontal=True, key="pra_espessura")
    st.toggle("Prateleira Engrossada", key="pra_engrossada")
    reset_button("pra")

    inp = ShelfInput(
        depth=st.session_state["pra_profundidade"],
        width=st.session_state["pra_largura"],
        opening_height=st.session_state["pra_altura"],
        thickness_mm=st.session_state["pra_espessura"],
        count=st.session_state["pra_qtd"],
        thickened=st.session_state["pra_engrossada"],
    )
    result = compute_shelf(inp)
    if result is None:
        return

    st.subheader("📐 Resultados")
    rows = [
        ("Profundidade Final", f"{result.final_depth:.2f} cm"),
        ("Largura Final", f"{result.final_width:.2f} cm"),
        ("Espessura por Prateleira", f"{result.effective_thickness:.2f} cm"),
        ("Soma das Espessuras", f"{result.total_shelf_thickness:.2f} cm"),
        ("Altura Disponível (vãos)", f"{result.available_height:.2f} cm"),
        ("Quantidade de Vãos", str(result.gap_count)),
    ]
    st.table(pd.DataFrame(rows, columns=["Medida", "Valor"]).set_index("Medida"))
    c1, c2 = st.columns(2)
    c1.metric("Altura de Cada Vão", f"{result.gap_height:.2f} cm")
    c2.metric("Medida do Pitão", f"{result.piton_measure:.2f} cm")

    count = parse_count(inp.count)
    if result.gap_height > 0 and count <= MAX_ITENS_DESENHO:
        with st.expander("Vista frontal"):
            st.pyplot(draw_shelf_stack(parse_number(inp.width), parse_number(inp.opening_height), result, count))


# ==========================================
# 6. PÁGINA
# ==========================================

with error_boundary(on_reload=reset_all):
    st.title(f"{APP_ICON} {APP_TITLE}")
    st.caption(APP_SUBTITLE)

    tabs = st.tabs(["🗄️ Gavetas", "👟 Sapateiras", "🪵 Ripados", "📏 Rodapé", "📚 Prateleiras"])
    with tabs[0]:
        render_drawers()
    with tabs[1]:
        render_shoe_racks()
    with tabs[2]:
        render_slats()
    with tabs[3]:
        render_baseboard()
    with tabs[4]:
        render_shelves()

    st.caption(f"© {APP_SUBTITLE}")
