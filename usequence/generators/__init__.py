"""
generators - Izlazni generatori za plan studija

Dostupni generatori:
    JSONPlanGenerator       - JSON lista termina (CLI, HTTP servis, sync)
    MarkdownReportGenerator - Markdown izvjestaj po terminima
"""
from .json_gen import JSONPlanGenerator
from .md_gen import MarkdownReportGenerator
