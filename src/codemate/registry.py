"""Template registry: the fixed table of supported frameworks.

Each framework maps to a FrameworkSpec carrying two pure functions: one that
turns a component name into a filename following the framework's naming
convention, and one that renders the component source. The table is built
once at import time and never mutated.
"""

from collections.abc import Callable
from dataclasses import dataclass

from codemate.naming import (
    name_forms,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
)
from codemate.templates import (
    ANGULAR_COMPONENT_TEMPLATE,
    JAVA_CLASS_TEMPLATE,
    NODE_MODULE_TEMPLATE,
    PYTHON_MODULE_TEMPLATE,
    REACT_COMPONENT_TEMPLATE,
)


@dataclass(frozen=True)
class FrameworkSpec:
    id: str
    display_name: str
    filename_rule: Callable[[str], str]
    template_fn: Callable[[str], str]

    def filename(self, name: str) -> str:
        return self.filename_rule(name)

    def render(self, name: str) -> str:
        return self.template_fn(name)


def _renderer(template: str) -> Callable[[str], str]:
    """Build a template function that formats *template* with the name forms."""

    def render(name: str) -> str:
        return template.format(**name_forms(name))

    return render


# ---------------------------------------------------------------------------
# Combined lookup: framework id -> spec (insertion order is the listing order)
# ---------------------------------------------------------------------------

FRAMEWORKS = {
    "react": FrameworkSpec(
        id="react",
        display_name="React",
        filename_rule=lambda name: f"{to_pascal_case(name)}.tsx",
        template_fn=_renderer(REACT_COMPONENT_TEMPLATE),
    ),
    "angular": FrameworkSpec(
        id="angular",
        display_name="Angular",
        filename_rule=lambda name: f"{to_kebab_case(name)}.component.ts",
        template_fn=_renderer(ANGULAR_COMPONENT_TEMPLATE),
    ),
    "python": FrameworkSpec(
        id="python",
        display_name="Python",
        filename_rule=lambda name: f"{to_snake_case(name)}.py",
        template_fn=_renderer(PYTHON_MODULE_TEMPLATE),
    ),
    "node": FrameworkSpec(
        id="node",
        display_name="Node.js",
        filename_rule=lambda name: f"{to_camel_case(name)}.js",
        template_fn=_renderer(NODE_MODULE_TEMPLATE),
    ),
    "java": FrameworkSpec(
        id="java",
        display_name="Java",
        filename_rule=lambda name: f"{to_pascal_case(name)}.java",
        template_fn=_renderer(JAVA_CLASS_TEMPLATE),
    ),
}

SUPPORTED_FRAMEWORKS = tuple(FRAMEWORKS)


def lookup(framework: str) -> FrameworkSpec | None:
    """Return the spec for *framework*, or None when it is not supported.

    Matching is exact: identifiers are lowercase and case-sensitive.
    """
    return FRAMEWORKS.get(framework)
