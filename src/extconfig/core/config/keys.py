# src/extconfig/core/config/keys.py
"""
Chaves canônicas lidas do mapa de configuração do host.

Todas as fontes externas são declaradas no próprio mapa de configuração,
sob nomes fixos. Os valores são listas separadas por vírgula.

Precedência (da menor para a maior):
    1. configuração base do host
    2. FILE_NAME (da esquerda para a direita)
    3. FILE_NAME_ABSOLUTE (da esquerda para a direita)
    4. URL (da esquerda para a direita)
"""

FILE_NAME = "externalConfig.fileName"
FILE_ABSOLUTE_PATH = "externalConfig.fileAbsolutePath"
FILE_NAME_ABSOLUTE = "externalConfig.fileNameAbsolute"
URL = "externalConfig.URL"

LIST_SEPARATOR = ","

SCOPE_PREFIX = "%"
SCOPE_SEPARATOR = "."

URL_SCHEMES = ("http://", "https://")

PROPERTIES_ENCODING = "utf-8"


def default_file_name(deployment_id: str) -> str:
    """Nome de arquivo usado quando FILE_NAME não existe no mapa."""
    return "/" + deployment_id + ".properties"
