"""Python dataclass module."""

PYTHON_MODULE_TEMPLATE = '''\
"""{title} component."""

from dataclasses import dataclass, field


@dataclass
class {pascal}:
    """{title} data and behavior."""

    name: str = "{title}"
    tags: list[str] = field(default_factory=list)

    def describe(self) -> str:
        return f"{{self.name}} ({{len(self.tags)}} tags)"
'''
