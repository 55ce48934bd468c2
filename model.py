# model.py
# Modelo de dados e fórmulas das calculadoras de marcenaria

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from constants import (
    SLIDE_SIZES,
    MDF_THICKNESSES,
    DESCONTO_OCULTA,
    DESCONTO_OCULTA_REBAIXO,
    DESCONTO_TELESCOPICA,
    FOLGA_GAVETA,
    DESCONTO_ALTURA_FRENTE,
    DESCONTO_PUXADOR_CANOA,
    DESCONTO_ALTURA_SAPATEIRA,
    ALTURA_LATERAL_PADRAO,
    DESCONTO_RODAPE_MDF,
    DESCONTO_RODAPE_MADEIRA,
    DESCONTO_RODAPE_PAREDE,
    DESCONTO_COMPRIMENTO_RODAPE,
    DESCONTO_PROFUNDIDADE_PRATELEIRA,
    DESCONTO_LARGURA_PRATELEIRA,
)
from validation import parse_number, parse_count, parse_positive, is_in_catalog

logger = logging.getLogger(__name__)


# ======================================================
# TIPOS COMUNS
# ======================================================

class SlideType(str, Enum):
    HIDDEN = "oculta"
    TELESCOPIC = "telescopica"


class MaterialType(str, Enum):
    MDF = "mdf"
    WOOD = "madeira"


@dataclass(frozen=True)
class PanelSpec:
    width: float
    height: float
    quantity: int


@dataclass(frozen=True)
class CutList:
    """Peças de corte de gavetas e sapateiras."""
    front_back: PanelSpec
    side: PanelSpec


def _clamp(value):
    return max(0.0, value)


# ======================================================
# GAVETAS
# ======================================================

@dataclass(frozen=True)
class DrawerInput:
    width: object = None
    height: object = None
    depth: object = None          # só informativo, não entra na fórmula
    slide_size: int = 35
    slide_type: SlideType = SlideType.HIDDEN
    recessed: bool = False
    canoe_handle: bool = False
    count: int = 1


def drawer_deduction(slide_type, recessed):
    if slide_type == SlideType.HIDDEN:
        return DESCONTO_OCULTA_REBAIXO if recessed else DESCONTO_OCULTA
    return DESCONTO_TELESCOPICA


def normalize_drawer(inp: DrawerInput) -> DrawerInput:
    # Rebaixo só existe com corrediça oculta
    if inp.slide_type != SlideType.HIDDEN and inp.recessed:
        return replace(inp, recessed=False)
    return inp


def compute_drawer(inp: DrawerInput) -> Optional[CutList]:
    inp = normalize_drawer(inp)
    width = parse_number(inp.width)
    height = parse_number(inp.height)
    count = parse_count(inp.count)

    if width is None or height is None or count is None or count < 1:
        logger.debug("Gavetas: dados incompletos, sem resultado")
        return None
    if not is_in_catalog(inp.slide_size, SLIDE_SIZES):
        logger.debug("Gavetas: corrediça %s fora do catálogo", inp.slide_size)
        return None

    # N gavetas -> N + 1 espaços
    total_gaps = (count + 1) * FOLGA_GAVETA
    side_height = (height - total_gaps) / count

    front_back_height = side_height - DESCONTO_ALTURA_FRENTE
    if inp.canoe_handle:
        front_back_height -= DESCONTO_PUXADOR_CANOA

    front_back_width = width - drawer_deduction(inp.slide_type, inp.recessed)

    return CutList(
        front_back=PanelSpec(_clamp(front_back_width), _clamp(front_back_height), count * 2),
        side=PanelSpec(float(inp.slide_size), _clamp(side_height), count * 2),
    )


def drawer_summary(inp: DrawerInput) -> str:
    inp = normalize_drawer(inp)
    count = parse_count(inp.count) or 0
    plural = "s" if count > 1 else ""
    text = f"{count} gaveta{plural} com corrediça {inp.slide_type.value} de {inp.slide_size}cm"
    if inp.recessed:
        text += " (com rebaixo)"
    if inp.canoe_handle:
        text += " (com puxador canoa)"
    return text


# ======================================================
# SAPATEIRAS
# ======================================================

@dataclass(frozen=True)
class ShoeRackInput:
    width: object = None
    side_height: object = ALTURA_LATERAL_PADRAO
    opening_height: object = None   # só aparece no relatório
    depth: object = None            # só aparece no relatório
    slide_size: int = 35
    slide_type: SlideType = SlideType.HIDDEN
    count: int = 1


def shoe_rack_deduction(slide_type):
    return DESCONTO_OCULTA if slide_type == SlideType.HIDDEN else DESCONTO_TELESCOPICA


def normalize_shoe_rack(inp: ShoeRackInput) -> ShoeRackInput:
    # Sem regras de normalização nesta calculadora
    return inp


def compute_shoe_rack(inp: ShoeRackInput) -> Optional[CutList]:
    inp = normalize_shoe_rack(inp)
    width = parse_number(inp.width)
    side_height = parse_number(inp.side_height)
    count = parse_count(inp.count)

    if width is None or side_height is None or count is None or count < 1:
        logger.debug("Sapateiras: dados incompletos, sem resultado")
        return None
    if not is_in_catalog(inp.slide_size, SLIDE_SIZES):
        logger.debug("Sapateiras: corrediça %s fora do catálogo", inp.slide_size)
        return None

    front_back_height = side_height - DESCONTO_ALTURA_SAPATEIRA
    front_back_width = width - shoe_rack_deduction(inp.slide_type)

    return CutList(
        front_back=PanelSpec(_clamp(front_back_width), _clamp(front_back_height), count * 2),
        side=PanelSpec(float(inp.slide_size), _clamp(side_height), count * 2),
    )


def shoe_rack_summary(inp: ShoeRackInput) -> str:
    count = parse_count(inp.count) or 0
    plural = "s" if count > 1 else ""
    return f"{count} sapateira{plural} com corrediça {inp.slide_type.value} de {inp.slide_size}cm"


# ======================================================
# RIPADOS
# ======================================================

@dataclass(frozen=True)
class SlatInput:
    total: object = None
    count: object = None
    slat_width: object = None
    splice: bool = False


@dataclass(frozen=True)
class SlatResult:
    occupied: float
    remaining: float
    gap_count: int
    gap_width: float
    slat_width: float
    splice: bool

    @property
    def exceeds_length(self):
        """Os ripados não cabem na peça (vão negativo)."""
        return self.gap_width < 0

    @property
    def inner_half(self):
        # Metade da última ripa que fica dentro da peça quando há emenda
        return self.slat_width / 2


def normalize_slat(inp: SlatInput) -> SlatInput:
    # Sem regras de normalização nesta calculadora
    return inp


def compute_slat(inp: SlatInput) -> Optional[SlatResult]:
    inp = normalize_slat(inp)
    total = parse_number(inp.total)
    count = parse_count(inp.count)
    slat_width = parse_number(inp.slat_width)

    if total is None or count is None or slat_width is None or count < 2:
        logger.debug("Ripados: dados incompletos, sem resultado")
        return None

    if inp.splice:
        occupied = (count - 1) * slat_width + slat_width / 2
    else:
        occupied = count * slat_width

    gap_count = count - 1
    remaining = total - occupied
    gap_width = remaining / gap_count

    result = SlatResult(
        occupied=occupied,
        remaining=remaining,
        gap_count=gap_count,
        gap_width=gap_width,
        slat_width=slat_width,
        splice=inp.splice,
    )
    if result.exceeds_length:
        logger.debug("Ripados: %d ripas de %.1f cm excedem %.1f cm", count, slat_width, total)
    return result


# ======================================================
# RODAPÉ
# ======================================================

@dataclass(frozen=True)
class BaseboardInput:
    depth: object = None
    length: object = None
    material: MaterialType = MaterialType.MDF
    wall: bool = False


@dataclass(frozen=True)
class BaseboardResult:
    depth: Optional[float]
    length: Optional[float]


def baseboard_deduction(material, wall):
    if material == MaterialType.MDF:
        return DESCONTO_RODAPE_MDF
    return DESCONTO_RODAPE_PAREDE if wall else DESCONTO_RODAPE_MADEIRA


def normalize_baseboard(inp: BaseboardInput) -> BaseboardInput:
    # Rodapé de parede só existe para madeira
    if inp.material == MaterialType.MDF and inp.wall:
        return replace(inp, wall=False)
    return inp


def compute_baseboard(inp: BaseboardInput) -> Optional[BaseboardResult]:
    """
    Profundidade e comprimento são independentes: cada um pode faltar.
    Retorna None apenas quando nenhum dos dois pode ser calculado.
    """
    inp = normalize_baseboard(inp)
    depth = parse_positive(inp.depth)
    length = parse_positive(inp.length)

    result_depth = None
    if depth is not None:
        result_depth = _clamp(depth - baseboard_deduction(inp.material, inp.wall))

    result_length = None
    if length is not None:
        result_length = _clamp(length - DESCONTO_COMPRIMENTO_RODAPE)

    if result_depth is None and result_length is None:
        logger.debug("Rodapé: dados incompletos, sem resultado")
        return None
    return BaseboardResult(depth=result_depth, length=result_length)


# ======================================================
# PRATELEIRAS
# ======================================================

@dataclass(frozen=True)
class ShelfInput:
    depth: object = None
    width: object = None
    opening_height: object = None
    thickness_mm: int = 15
    count: object = None
    thickened: bool = False


@dataclass(frozen=True)
class ShelfResult:
    final_depth: float
    final_width: float
    effective_thickness: float
    total_shelf_thickness: float
    available_height: float
    gap_count: int
    gap_height: float
    piton_measure: float


def normalize_shelf(inp: ShelfInput) -> ShelfInput:
    # Sem regras de normalização nesta calculadora
    return inp


def compute_shelf(inp: ShelfInput) -> Optional[ShelfResult]:
    inp = normalize_shelf(inp)
    depth = parse_positive(inp.depth)
    width = parse_positive(inp.width)
    height = parse_positive(inp.opening_height)
    count = parse_count(inp.count)

    if depth is None or width is None or height is None or count is None or count < 1:
        logger.debug("Prateleiras: dados incompletos, sem resultado")
        return None
    if not is_in_catalog(inp.thickness_mm, MDF_THICKNESSES):
        logger.debug("Prateleiras: espessura %s mm fora do catálogo", inp.thickness_mm)
        return None

    # Sem limite em zero: medidas finais podem ficar negativas
    final_depth = depth - DESCONTO_PROFUNDIDADE_PRATELEIRA
    final_width = width - DESCONTO_LARGURA_PRATELEIRA

    thickness_cm = inp.thickness_mm / 10
    effective = thickness_cm * 2 if inp.thickened else thickness_cm
    total_thickness = count * effective
    available = height - total_thickness
    gap_count = count + 1
    gap_height = available / gap_count
    piton = gap_height + thickness_cm if inp.thickened else gap_height

    return ShelfResult(
        final_depth=final_depth,
        final_width=final_width,
        effective_thickness=effective,
        total_shelf_thickness=total_thickness,
        available_height=available,
        gap_count=gap_count,
        gap_height=gap_height,
        piton_measure=piton,
    )
