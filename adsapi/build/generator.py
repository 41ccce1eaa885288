"""
Wrapper class generation.

Given a service description and the type registry of its WSDL, emits the Python
source of a ServiceWrapper subclass with one method per remote operation. The
generated methods validate and convert their arguments, document the expected
types, and delegate the call to ServiceWrapper.execute_action.
"""

import keyword
import logging
import os
import types
from datetime import datetime
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader

from adsapi import __version__
from adsapi.extensions import ExtensionConfig
from adsapi.soap.registry import ElementDefinition, TypeRegistry
from adsapi.soap.wsdl import MethodDescription, ServiceDescription
from adsapi.utils.naming import safe_identifier, snake_case

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "wrapper_class.py.j2"
ARRAY_LABEL = "list of"


def _get_jinja_env() -> Environment:
    """Get configured Jinja2 environment for code templates."""
    template_dir = os.path.join(os.path.dirname(__file__), "templates")

    env = Environment(
        loader=FileSystemLoader(template_dir),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["pyrepr"] = repr
    return env


def _method_identifier(name: str) -> str:
    return f"{name}_" if keyword.iskeyword(name) else name


class WrapperGenerator:
    """Generates wrapper classes for the services of one API."""

    def __init__(
        self,
        api_config,
        registry: TypeRegistry,
        extension_config: ExtensionConfig | None = None,
        template_name: str = TEMPLATE_NAME,
    ):
        self.api_config = api_config
        self.registry = registry
        self.extension_config = extension_config or ExtensionConfig()
        self.template_name = template_name

    def type_label(self, element: ElementDefinition) -> str:
        """Human-readable expected type of a parameter or return value."""
        type_name = element.type_name or "object"
        if element.as_array:
            return f"{ARRAY_LABEL} {type_name}"
        return type_name

    def doc_link(self, version: str, service: str, method: str) -> str | None:
        """URL of a method's entry in the online docs, None if there is none."""
        return self.api_config.doc_link(version, service, method)

    def _argument_context(self, element: ElementDefinition) -> dict[str, Any]:
        return {
            "name": element.name,
            "param": safe_identifier(element.name),
            "type_name": element.type_name,
            "is_array": element.as_array,
            "label": self.type_label(element),
        }

    def _method_context(self, service: ServiceDescription, method: MethodDescription) -> dict[str, Any]:
        arguments = []
        if method.input_type is not None:
            arguments = [self._argument_context(e) for e in self.registry.all_elements(method.input_type)]

        returns = []
        if method.output_type is not None:
            returns = [self._argument_context(e) for e in self.registry.all_elements(method.output_type)]

        params = [arg["param"] for arg in arguments]
        py_name = _method_identifier(method.name)
        alias = snake_case(method.name)

        return {
            "name": method.name,
            "py_name": py_name,
            "input_type": method.input_type,
            "arguments": arguments,
            "returns": returns,
            "signature": "".join(f", {param}" for param in params),
            "call_args": ", ".join(params),
            "doc_link": self.doc_link(service.version, service.name, method.name),
            "alias": alias if alias != method.name and not keyword.iskeyword(alias) else None,
        }

    def _extension_context(self, service: ServiceDescription) -> list[dict[str, Any]]:
        extensions = []
        for name in self.extension_config.for_service(service.version, service.name):
            params = self.extension_config.methods.get(name, [])
            names = [param.split("=", 1)[0] for param in params]
            extensions.append(
                {
                    "name": name,
                    "signature": "".join(f", {param}" for param in params),
                    "call_args": "".join(f", {n}" for n in names),
                }
            )
        return extensions

    def generate_wrapper_class(self, service: ServiceDescription) -> str:
        """
        Generate the wrapper class for a given service.

        These classes make it easier to invoke the API methods by removing the
        need to build the request wrapper object, allowing the call parameters
        to be passed directly.

        Args:
            service: description of the service and its operations

        Returns:
            The Python source of the module defining the class
        """
        template = _get_jinja_env().get_template(self.template_name)
        source = template.render(
            library_version=__version__,
            generated_at=datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            api_name=self.api_config.api_name,
            version=service.version,
            service=service.name,
            class_name=self.api_config.interface_name(service.version, service.name),
            namespace=service.namespace,
            methods=[self._method_context(service, method) for method in service.methods],
            extensions=self._extension_context(service),
        )
        logger.debug(f"Generated wrapper for {service.version} {service.name} ({len(service.methods)} methods)")
        return source

    def write_wrapper_module(self, service: ServiceDescription, output_dir: str | Path) -> Path:
        """Write the generated module to ``<output_dir>/<version>/<service>.py``.

        Returns:
            Path of the written module
        """
        package_dir = Path(output_dir) / service.version
        package_dir.mkdir(parents=True, exist_ok=True)
        for directory in (Path(output_dir), package_dir):
            init_file = directory / "__init__.py"
            if not init_file.exists():
                init_file.write_text("")

        module_path = package_dir / f"{snake_case(service.name).lower()}.py"
        module_path.write_text(self.generate_wrapper_class(service))
        logger.info(f"Wrote {module_path}")
        return module_path


def load_wrapper_class(source: str, class_name: str, module_name: str = "adsapi.generated.runtime") -> type:
    """Compile generated source into a new module and return the wrapper class."""
    module = types.ModuleType(module_name)
    code = compile(source, f"<generated {class_name}>", "exec")
    exec(code, module.__dict__)
    return getattr(module, class_name)
