import logging
import sys

class NamespaceFilter(logging.Filter):
    def __init__(self, allowed_namespaces=None):
        super().__init__()
        self.allowed_namespaces = allowed_namespaces if allowed_namespaces is not None else []

    def filter(self, record):
        if not self.allowed_namespaces:
            return True # If no namespaces are specified, allow all records
        return any(record.name.startswith(ns) for ns in self.allowed_namespaces)

log_formatter = logging.Formatter(
    fmt="%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

app_logger = logging.getLogger("discoveries")
app_logger.setLevel(logging.INFO)

console_handler = logging.StreamHandler(sys.stdout)
console_handler.setFormatter(log_formatter)

# To only see logs from the reports feature and the app entry point:
#
# allowed_log_namespaces = ["discoveries.features.location_reports", "discoveries.main"]
# console_handler.addFilter(NamespaceFilter(allowed_log_namespaces))
app_logger.addHandler(console_handler)

# Report submissions and search parsing are the noisiest paths while debugging.
logging.getLogger("discoveries.features.location_reports").setLevel(logging.DEBUG)

# Modules use logging.getLogger(__name__), so "discoveries.features.locations.service"
# inherits from "discoveries.features.locations" and then "discoveries".

# To print the SQL Tortoise sends:
# logging.getLogger("tortoise.db_client").setLevel(logging.DEBUG)
