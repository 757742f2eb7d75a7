"""Variable interpolation for message templates.

Templates use ``{name}`` placeholders. ``{{`` and ``}}`` produce literal
braces, and a placeholder may carry a format spec (``{count:>4}``) that is
applied to the variable's string value.
"""

from string import Formatter
from typing import Mapping

from loon.errors import InterpolationError
from loon.logging import get_module_logger

logger = get_module_logger()

_formatter = Formatter()


def interpolate(template: str, variables: Mapping[str, str]) -> str:
    """Substitute variables into a template.

    Every placeholder is validated before anything is substituted, so the
    result never contains an unresolved placeholder.

    Args:
        template: Message template with {name} placeholders.
        variables: Variable name -> pre-stringified value.

    Returns:
        Template with all placeholders replaced.

    Raises:
        InterpolationError: If a placeholder is malformed or has no value.
    """
    try:
        parsed = list(_formatter.parse(template))
    except ValueError as e:
        raise InterpolationError(
            f"Malformed template {template!r}: {e}", template=template
        ) from e

    chunks = []
    for literal, field_name, format_spec, conversion in parsed:
        chunks.append(literal)
        if field_name is None:
            continue

        if not field_name:
            raise InterpolationError(
                f"Empty placeholder in template {template!r}", template=template
            )
        if conversion is not None:
            raise InterpolationError(
                f"Conversion '!{conversion}' is not supported in placeholder '{field_name}'",
                template=template,
                placeholder=field_name,
            )
        if format_spec and ("{" in format_spec or "}" in format_spec):
            raise InterpolationError(
                f"Nested placeholder in format spec of '{field_name}'",
                template=template,
                placeholder=field_name,
            )
        if field_name not in variables:
            logger.warning(
                "missing_interpolation_variable",
                variable=field_name,
                available_variables=sorted(variables),
            )
            raise InterpolationError(
                f"Missing interpolation variable: {field_name}",
                template=template,
                placeholder=field_name,
            )

        value = variables[field_name]
        if format_spec:
            try:
                value = format(value, format_spec)
            except ValueError as e:
                raise InterpolationError(
                    f"Invalid format spec '{format_spec}' for '{field_name}': {e}",
                    template=template,
                    placeholder=field_name,
                ) from e
        chunks.append(value)

    return "".join(chunks)
