from jinja2 import Environment, StrictUndefined
from pydantic import BaseModel

_environment = Environment(undefined=StrictUndefined, keep_trailing_newline=True)


class Prompt(BaseModel):
    name: str
    version: str
    description: str
    inputs: dict[str, str]
    template: str

    class Config:
        extra = "forbid"

    def render(self, **values: object) -> str:
        """Fill the template's `{{ input }}` placeholders.

        Every declared input must be supplied; undeclared ones are rejected.
        """
        missing = sorted(set(self.inputs) - set(values))
        if missing:
            raise ValueError(
                f"Prompt '{self.name}' missing inputs: {', '.join(missing)}"
            )
        unknown = sorted(set(values) - set(self.inputs))
        if unknown:
            raise ValueError(
                f"Prompt '{self.name}' got unknown inputs: {', '.join(unknown)}"
            )
        return _environment.from_string(self.template).render(**values)
