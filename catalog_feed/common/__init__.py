# Common utilities
from .config_loader import load_config, load_export_settings, load_validation_rules
from .csv_utils import write_csv
from .log_config import setup_logging
