# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""Resolvable values for resource definitions.

A value in a resource definition is either known when the definition is
built (``Concrete``) or only known once the deployment graph has been
resolved (``Pending``). Pending values carry the CloudFormation intrinsic
expression that will produce them, so they can be forwarded and rendered
without ever being evaluated here.

Anything that inspects content (length checks, splitting) must branch on
``kind`` and only operate on ``Concrete`` values.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Concrete(BaseModel):
    """A value known at definition time."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["concrete"] = "concrete"
    value: Any = Field(..., description="The known value")


class Pending(BaseModel):
    """A value produced by a later graph-resolution stage."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["pending"] = "pending"
    expression: dict[str, Any] = Field(
        ..., description="Intrinsic expression that resolves to the value"
    )

    @classmethod
    def ref(cls, logical_id: str) -> "Pending":
        """Reference to the primary identifier of a resource."""
        return cls(expression={"Ref": logical_id})

    @classmethod
    def get_att(cls, logical_id: str, attribute: str) -> "Pending":
        """Reference to an output attribute of a resource."""
        return cls(expression={"Fn::GetAtt": [logical_id, attribute]})


Resolvable = Annotated[Union[Concrete, Pending], Field(discriminator="kind")]

# Placeholder telling the provisioning engine to assign the physical name itself.
ASSIGNED_NAME = Pending(expression={"Ref": "AWS::NoValue"})


def as_resolvable(value: Any) -> Any:
    """
    Coerce a raw input into a resolvable value.

    Plain strings become ``Concrete``; resolvable instances and their dict
    forms are returned unchanged so pydantic can finish validating them.
    Used as a ``mode="before"`` validator on resolvable model fields.

    Args:
        value: Raw field input

    Returns:
        A ``Concrete``/``Pending`` instance, or the input left for pydantic
    """
    if isinstance(value, (Concrete, Pending)):
        return value
    if isinstance(value, dict) and "kind" in value:
        return value
    if isinstance(value, str):
        return Concrete(value=value)
    return value


def is_pending(value: Any) -> bool:
    """Return True if ``value`` is a pending (unresolved) value."""
    return isinstance(value, Pending)


def split(delimiter: str, value: Concrete | Pending) -> Concrete | Pending:
    """
    Split a string value on ``delimiter``.

    Args:
        delimiter: Separator to split on
        value: Resolvable string

    Returns:
        ``Concrete`` list of parts, or a ``Pending`` ``Fn::Split`` expression
    """
    if isinstance(value, Pending):
        return Pending(expression={"Fn::Split": [delimiter, value.expression]})
    return Concrete(value=value.value.split(delimiter))


def select(index: int, value: Concrete | Pending) -> Concrete | Pending:
    """
    Select one element from a list value.

    Args:
        index: Position of the element
        value: Resolvable list, usually the result of ``split``

    Returns:
        ``Concrete`` element, or a ``Pending`` ``Fn::Select`` expression
    """
    if isinstance(value, Pending):
        return Pending(expression={"Fn::Select": [index, value.expression]})
    return Concrete(value=value.value[index])


def render(value: Concrete | Pending | None) -> Any:
    """Render a resolvable as template data: the value itself or its expression."""
    if value is None:
        return None
    if isinstance(value, Pending):
        return value.expression
    return value.value
