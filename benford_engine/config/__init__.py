from benford_engine.config.analysis_config import AnalysisConfig
from benford_engine.config.loader import load_config_file, load_config_with_precedence

__all__ = ["AnalysisConfig", "load_config_file", "load_config_with_precedence"]
