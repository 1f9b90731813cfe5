import importlib
import inspect

import pytest

# Mapping of module -> (ProtocolName, required_methods: {name: arity})
PORT_PROTOCOLS = {
    "webconf.ports.key_value_source": ("KeyValueSource", {"get_keys": 0, "get_property": 1}),
    "webconf.ports.list_delimiter": (
        "ListDelimiterPolicy",
        {"is_delimiter_parsing_disabled": 0, "get_list_delimiter": 0},
    ),
    "webconf.ports.telemetry": ("Telemetry", {"log": -1}),  # variable kwargs
}

# Concrete classes that must satisfy a port
IMPLEMENTATIONS = [
    ("webconf.adapters.mapping_source", "MappingSource", "KeyValueSource"),
    ("webconf.adapters.request_params", "RequestParamsSource", "KeyValueSource"),
    ("webconf.adapters.env_source", "EnvSource", "KeyValueSource"),
    ("webconf.config.settings", "DelimiterSettings", "ListDelimiterPolicy"),
]


@pytest.mark.parametrize("module_name,meta", PORT_PROTOCOLS.items())
def test_required_port_signatures(module_name, meta):
    proto_name, methods = meta
    module = importlib.import_module(module_name)
    proto = getattr(module, proto_name)
    assert inspect.isclass(proto), f"{proto_name} not a class"
    for method_name, arity in methods.items():
        fn = getattr(proto, method_name, None)
        assert fn is not None, f"Missing method {method_name} on {proto_name}"
        if arity >= 0:
            sig = inspect.signature(fn)
            # remove self / cls
            params = [p for p in sig.parameters.values() if p.kind == p.POSITIONAL_OR_KEYWORD][1:]
            assert (
                len(params) == arity
            ), f"{proto_name}.{method_name} expected {arity} args got {len(params)}"


@pytest.mark.parametrize("module_name,class_name,port_name", IMPLEMENTATIONS)
def test_implementations_cover_port(module_name, class_name, port_name):
    cls = getattr(importlib.import_module(module_name), class_name)
    port_module = next(m for m, (name, _) in PORT_PROTOCOLS.items() if name == port_name)
    _, methods = PORT_PROTOCOLS[port_module]
    for method_name in methods:
        assert callable(getattr(cls, method_name, None)), f"{class_name} lacks {method_name}"


@pytest.mark.parametrize(
    "module_name,class_name,expected",
    [
        ("webconf.adapters.mapping_source", "MappingSource", False),
        ("webconf.adapters.request_params", "RequestParamsSource", True),
        ("webconf.adapters.env_source", "EnvSource", False),
    ],
)
def test_multi_valued_flag(module_name, class_name, expected):
    cls = getattr(importlib.import_module(module_name), class_name)
    assert cls.multi_valued is expected
