# constants.py
# Constantes técnicas, catálogos e configuração da Calculadora Marcenaria

import os

# ---- APLICAÇÃO ----
APP_TITLE = "Calculadora Marcenaria"
APP_SUBTITLE = "Doriva Móveis Sob Medida"
APP_ICON = "🪚"
LOG_LEVEL = os.getenv("MARCENARIA_LOG_LEVEL", "INFO").upper()
ERROR_FILE = os.getenv("MARCENARIA_ERROR_FILE", "last_error.json")

# ---- CATÁLOGOS ----
SLIDE_SIZES = (25, 30, 35, 40, 45, 50, 55, 60)   # tamanho da corrediça [cm]
MDF_THICKNESSES = (15, 18, 25)                  # espessura do MDF [mm]

# ---- GAVETAS ----
DESCONTO_OCULTA = 4.0            # corrediça oculta [cm]
DESCONTO_OCULTA_REBAIXO = 2.1    # oculta com rebaixo [cm]
DESCONTO_TELESCOPICA = 5.7       # corrediça telescópica [cm]
FOLGA_GAVETA = 3.0               # espaço entre gavetas [cm]
DESCONTO_ALTURA_FRENTE = 2.5     # frente/traseira abaixo da lateral [cm]
DESCONTO_PUXADOR_CANOA = 2.0     # puxador canoa [cm]

# ---- SAPATEIRAS ----
DESCONTO_ALTURA_SAPATEIRA = 2.0  # frente/traseira abaixo da lateral [cm]
ALTURA_LATERAL_PADRAO = 6.0      # lateral fixa sugerida [cm]

# ---- RODAPÉ ----
DESCONTO_RODAPE_MDF = 8.5
DESCONTO_RODAPE_MADEIRA = 7.0
DESCONTO_RODAPE_PAREDE = 8.0
DESCONTO_COMPRIMENTO_RODAPE = 0.6   # 3 mm de cada lado [cm]

# ---- PRATELEIRAS ----
DESCONTO_PROFUNDIDADE_PRATELEIRA = 0.5   # 5 mm [cm]
DESCONTO_LARGURA_PRATELEIRA = 0.1        # 1 mm [cm]

# ---- VISUALIZAÇÃO ----
COR_MADEIRA = "#d7ba9d"
COR_FRENTE = "#fdf0d5"
COR_VAO = "#e9c46a"
COR_EMENDA = "#bc6c25"
COR_ALERTA = "#c1121f"
MAX_ITENS_DESENHO = 60   # acima disso não desenha a prévia
