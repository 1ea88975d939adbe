# src/extconfig/core/properties/parser.py
"""
Parser do formato texto de propriedades (`.properties`).

Formato aceito (mesma gramática usada pelos arquivos de propriedades
tradicionais do ecossistema JVM, lida sempre como texto já decodificado):

    - Linhas separadas por `\\n`, `\\r\\n` ou `\\r`
    - Linhas em branco são ignoradas
    - `#` ou `!` como primeiro caractere não branco → comentário
    - Espaços iniciais (espaço, tab, form feed) são ignorados
    - A chave termina no primeiro `=`, `:` ou espaço não escapado
    - Espaços em torno do separador são descartados; um único `=`/`:` é consumido
    - Número ímpar de `\\` no fim da linha → continuação na linha seguinte
      (espaços iniciais da continuação são descartados)
    - Escapes: `\\t`, `\\n`, `\\r`, `\\f`, `\\uXXXX`; `\\<c>` vira `<c>`

Invariantes:
    - O resultado é sempre um dict[str, str]
    - Chaves repetidas: a última ocorrência vence
    - Escape `\\u` malformado é erro explícito (PropertiesParseError)
    - Pares `\\uD8xx\\uDCxx` viram um único code point; surrogate isolado é erro
"""

from __future__ import annotations

import re
import string
from typing import Dict, Iterator, Tuple

from extconfig.core.exceptions import PropertiesParseError


_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_COMMENT_MARKERS = "#!"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_HIGH_SURROGATES = (0xD800, 0xDBFF)
_LOW_SURROGATES = (0xDC00, 0xDFFF)


def _continues(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _logical_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Junta linhas continuadas; produz (número da primeira linha, linha lógica)."""
    buffer = None
    start = 0

    for number, raw in enumerate(_LINE_BREAK.split(text), start=1):
        current = raw.lstrip(_WHITESPACE)

        if buffer is None:
            if not current or current[0] in _COMMENT_MARKERS:
                continue
            buffer = ""
            start = number

        if _continues(current):
            buffer += current[:-1]
            continue

        yield start, buffer + current
        buffer = None

    # arquivo terminou no meio de uma continuação
    if buffer:
        yield start, buffer


def _split_entry(line: str) -> Tuple[str, str]:
    size = len(line)
    index = 0

    while index < size:
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        index += 1

    key = line[:index]

    index = min(index, size)
    while index < size and line[index] in _WHITESPACE:
        index += 1
    if index < size and line[index] in _SEPARATORS:
        index += 1
        while index < size and line[index] in _WHITESPACE:
            index += 1

    return key, line[index:]


def _code_unit(text: str, start: int, line_number: int) -> int:
    digits = text[start:start + 4]
    if len(digits) != 4 or any(d not in string.hexdigits for d in digits):
        raise PropertiesParseError(
            message="Escape \\uXXXX malformado",
            details={"line": line_number, "escape": "\\u" + digits},
            hint="Use exatamente quatro dígitos hexadecimais após \\u.",
        )
    return int(digits, 16)


def _unpaired_surrogate(unit: int, line_number: int) -> PropertiesParseError:
    return PropertiesParseError(
        message="Surrogate UTF-16 sem par em escape \\uXXXX",
        details={"line": line_number, "escape": f"\\u{unit:04X}"},
        hint="Caracteres fora do BMP exigem o par alto+baixo, ex.: \\uD83D\\uDE00.",
    )


def _unescape(text: str, line_number: int) -> str:
    if "\\" not in text:
        return text

    out = []
    size = len(text)
    index = 0

    while index < size:
        char = text[index]
        if char != "\\":
            out.append(char)
            index += 1
            continue

        index += 1
        if index >= size:
            break

        char = text[index]
        if char == "u":
            unit = _code_unit(text, index + 1, line_number)
            index += 5

            if _HIGH_SURROGATES[0] <= unit <= _HIGH_SURROGATES[1]:
                # par UTF-16: o \u seguinte precisa ser a metade baixa
                low = None
                if text.startswith("\\u", index):
                    low = _code_unit(text, index + 2, line_number)
                if low is None or not _LOW_SURROGATES[0] <= low <= _LOW_SURROGATES[1]:
                    raise _unpaired_surrogate(unit, line_number)
                unit = 0x10000 + ((unit - _HIGH_SURROGATES[0]) << 10) + (low - _LOW_SURROGATES[0])
                index += 6
            elif _LOW_SURROGATES[0] <= unit <= _LOW_SURROGATES[1]:
                raise _unpaired_surrogate(unit, line_number)

            out.append(chr(unit))
            continue

        out.append(_ESCAPES.get(char, char))
        index += 1

    return "".join(out)


def parse_properties(text: str) -> Dict[str, str]:
    """
    Converte o texto de um arquivo `.properties` em um dicionário.

    Args:
        text (str): Conteúdo já decodificado (UTF-8).

    Returns:
        Dict[str, str]: Propriedades na ordem de primeira ocorrência.

    Raises:
        PropertiesParseError: Se algum escape `\\uXXXX` for inválido.
    """
    properties: Dict[str, str] = {}

    for line_number, line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        properties[_unescape(raw_key, line_number)] = _unescape(raw_value, line_number)

    return properties
