import json
import sys

from java_scanner.models.ast_models import ScanResult


# --- JSON export --------------------------------------------------------------

def to_json(result: ScanResult) -> str:
    """
    Serializes the scan result. Key order and indentation are fixed so two
    runs over the same tree give byte-identical output.
    """
    return json.dumps(result.to_dict(), indent=2)


def write_result(result: ScanResult, stream=None):
    stream = stream or sys.stdout
    stream.write(to_json(result) + "\n")
