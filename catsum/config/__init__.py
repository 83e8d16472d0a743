from .load import get_sources, get_report_config, project_root

__all__ = ["get_sources", "get_report_config", "project_root"]
