import importlib

mod = "arrowize"
class LazyLoader:
    """
    Lazy loader for the arrowize functions to speed up startup time.
    """
    def __init__(self, mappings):
        self._modules = {}
        self._mappings = mappings

    def _load_module(self, module_name):
        if module_name not in self._modules:
            self._modules[module_name] = importlib.import_module(module_name)
        return self._modules[module_name]

    def __getattr__(self, item):
        if item in self._mappings:
            module_name, attr_name = self._mappings[item]
            module = self._load_module(module_name)
            return getattr(module, attr_name)
        else:
            return self._load_module(f"{mod}.{item}")

# Define the functions and their corresponding module paths
_mappings = {
    "map_to_arrow": (f"{mod}.maptoarrow", "map_to_arrow"),
    "infer_arrow_schema": (f"{mod}.maptoarrow", "infer_arrow_schema"),
    "MapToArrowInferrer": (f"{mod}.maptoarrow", "MapToArrowInferrer"),
    "UndefinedFieldTypeError": (f"{mod}.maptoarrow", "UndefinedFieldTypeError"),
    "SchemaInferenceError": (f"{mod}.maptoarrow", "SchemaInferenceError"),
    "FieldPos": (f"{mod}.fieldpos", "FieldPos"),
    "scalar_type_of": (f"{mod}.arrowtypes", "scalar_type_of"),
    "convert_json_to_arrow": (f"{mod}.jsontoarrow", "convert_json_to_arrow"),
    "convert_json_to_parquet": (f"{mod}.jsontoarrow", "convert_json_to_parquet"),
}

_lazy_loader = LazyLoader(_mappings)

def __getattr__(name):
    return getattr(_lazy_loader, name)
