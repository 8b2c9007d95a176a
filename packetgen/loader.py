import json
import os.path

import yaml

from .datatypes import DefinitionError, load_codecs, load_packets

YAML_EXTENSIONS = (".yaml", ".yml")

def load_document(path):
    """
    Reads a JSON or, going by the file extension, YAML document.
    """
    try:
        with open(path) as f:
            if os.path.splitext(path)[1].lower() in YAML_EXTENSIONS:
                return yaml.safe_load(f)
            return json.load(f)
    except OSError as e:
        raise DefinitionError("can't read {}: {}".format(path, e.strerror or e)) from e
    except (ValueError, yaml.YAMLError) as e:
        raise DefinitionError("malformed document {}: {}".format(path, e)) from e

def _load(path, validate):
    document = load_document(path)
    try:
        return validate(document)
    except DefinitionError as e:
        raise DefinitionError("{}: {}".format(path, e)) from e

def load_definitions(codecs_path, packets_path):
    return _load(codecs_path, load_codecs), _load(packets_path, load_packets)
