"""Component templates.

Each constant is a format string. Use .format() with the placeholders from
codemate.naming.name_forms() (pascal, camel, kebab, snake, title).

Templates are organized by framework, one module per framework. This
__init__ re-exports every constant.
"""

from codemate.templates.angular import ANGULAR_COMPONENT_TEMPLATE
from codemate.templates.java import JAVA_CLASS_TEMPLATE
from codemate.templates.node import NODE_MODULE_TEMPLATE
from codemate.templates.python import PYTHON_MODULE_TEMPLATE
from codemate.templates.react import REACT_COMPONENT_TEMPLATE

__all__ = [
    "ANGULAR_COMPONENT_TEMPLATE",
    "JAVA_CLASS_TEMPLATE",
    "NODE_MODULE_TEMPLATE",
    "PYTHON_MODULE_TEMPLATE",
    "REACT_COMPONENT_TEMPLATE",
]
