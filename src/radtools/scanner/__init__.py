from radtools.scanner.components import parse_component, scan_components

__all__ = ["parse_component", "scan_components"]
