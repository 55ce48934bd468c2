# drawings.py
# Funções de desenho (Matplotlib) das calculadoras

import matplotlib.pyplot as plt
import matplotlib.patches as patches
from constants import COR_MADEIRA, COR_FRENTE, COR_VAO, COR_EMENDA, FOLGA_GAVETA


# ======================================================
# GAVETAS - VISTA FRONTAL DO VÃO
# ======================================================

def draw_drawer_front(width, height, cut_list, count):
    fig, ax = plt.subplots(figsize=(8, 6))

    # Contorno do vão
    ax.add_patch(
        patches.Rectangle(
            (0, 0), width, height, linewidth=3, edgecolor="black", facecolor="none"
        )
    )

    side_height = cut_list.side.height
    front_width = cut_list.front_back.width
    x0 = (width - front_width) / 2

    for i in range(count):
        y = FOLGA_GAVETA + i * (side_height + FOLGA_GAVETA)
        ax.add_patch(
            patches.Rectangle(
                (x0, y),
                front_width,
                side_height,
                facecolor=COR_FRENTE,
                edgecolor="#669bbc",
                linewidth=1,
            )
        )
        ax.text(
            width / 2,
            y + side_height / 2,
            f"Gaveta {i + 1}",
            ha="center",
            va="center",
            fontsize=8,
        )

    ax.set_xlim(-5, width + 5)
    ax.set_ylim(-5, height + 5)
    ax.set_aspect("equal")
    ax.axis("off")

    plt.close(fig)
    return fig


# ======================================================
# SAPATEIRAS - DISTRIBUIÇÃO
# ======================================================

def draw_shoe_rack_stack(cut_list, count):
    """Sapateiras intercaladas com vãos: começa com sapateira, termina com vão."""
    fig, ax = plt.subplots(figsize=(8, max(2, count * 1.2)))

    tray_h = max(cut_list.side.height, 1.0)
    gap_h = tray_h * 0.8
    width = max(cut_list.front_back.width, 1.0)

    y = 0.0
    for i in range(count):
        ax.add_patch(
            patches.Rectangle((0, y), width, tray_h, facecolor=COR_MADEIRA, edgecolor="black")
        )
        ax.text(
            width / 2,
            y + tray_h / 2,
            f"Sapateira {i + 1} ({cut_list.side.height:.1f}cm)",
            ha="center",
            va="center",
            fontsize=8,
        )
        y += tray_h
        ax.add_patch(
            patches.Rectangle(
                (0, y), width, gap_h, facecolor=COR_VAO, edgecolor="black", linestyle="--", alpha=0.4
            )
        )
        ax.text(width / 2, y + gap_h / 2, "Vão", ha="center", va="center", fontsize=7)
        y += gap_h

    ax.set_xlim(-2, width + 2)
    ax.set_ylim(-2, y + 2)
    ax.invert_yaxis()
    ax.axis("off")

    plt.close(fig)
    return fig


# ======================================================
# RIPADOS - DISTRIBUIÇÃO
# ======================================================

def draw_slat_layout(total, count, result):
    fig, ax = plt.subplots(figsize=(12, 2.5))

    w = result.slat_width
    gap = result.gap_width
    height = max(total * 0.08, w * 2)

    # Peça
    ax.add_patch(
        patches.Rectangle((0, 0), total, height, linewidth=2, edgecolor="black", facecolor="none")
    )

    for i in range(count):
        x = i * (w + gap)
        last = i == count - 1
        if result.splice and last:
            # Metade dentro, metade para fora da peça
            ax.add_patch(
                patches.Rectangle(
                    (x, 0), w, height, facecolor=COR_EMENDA, edgecolor=COR_EMENDA,
                    linestyle="--", alpha=0.5,
                )
            )
            ax.text(x + w / 2, height / 2, "½", ha="center", va="center", fontsize=8)
            ax.annotate(
                "", xy=(x + w * 2, height / 2), xytext=(x + w, height / 2),
                arrowprops={"arrowstyle": "->", "color": "gray"},
            )
        else:
            ax.add_patch(patches.Rectangle((x, 0), w, height, facecolor=COR_MADEIRA, edgecolor="black"))

        if not last:
            ax.add_patch(
                patches.Rectangle((x + w, 0), gap, height, facecolor=COR_VAO, alpha=0.3)
            )

    ax.set_xlim(-total * 0.02, total * 1.05 + w)
    ax.set_ylim(-height * 0.2, height * 1.2)
    ax.set_title(f"R = Ripado ({w:g}cm) | V = Vão ({gap:.2f}cm)", fontsize=9)
    ax.axis("off")

    plt.close(fig)
    return fig


# ======================================================
# PRATELEIRAS - VISTA FRONTAL
# ======================================================

def draw_shelf_stack(width, opening_height, result, count):
    fig, ax = plt.subplots(figsize=(6, 8))

    ax.add_patch(
        patches.Rectangle(
            (0, 0), width, opening_height, linewidth=3, edgecolor="black", facecolor="none"
        )
    )

    gap = result.gap_height
    thick = result.effective_thickness
    for k in range(count):
        yp = (k + 1) * gap + k * thick
        ax.add_patch(
            patches.Rectangle((0, yp), width, thick, facecolor=COR_EMENDA, edgecolor="black")
        )

    ax.set_xlim(-5, width + 5)
    ax.set_ylim(-5, opening_height + 5)
    ax.set_aspect("equal")
    ax.axis("off")

    plt.close(fig)
    return fig
