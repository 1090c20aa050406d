from .json_export import export_json, palette_to_dict
from .report import generate_readability_report, print_palette

__all__ = ["export_json", "generate_readability_report", "palette_to_dict", "print_palette"]
