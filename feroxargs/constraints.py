"""
Cross-argument constraints and their validator.

Variants
- Required():             the argument must be present.
- RequiredUnless(other):  the argument must be present unless `other` is.
- ConflictsWith(other):   the argument and `other` cannot both be present.

The variants are plain frozen records; all semantics live in validate(), which
walks the finalized catalog in declaration order and stops at the first
violation. Reporting order therefore depends on the catalog only, never on the
order in which tokens were typed.
"""
from .arguments import Required, RequiredUnless, ConflictsWith
from .faults import FaultCode, MissingRequiredArgumentError, ConflictingArgumentsError
from .logs import logger


def validate(catalog, values, /):
    """
    Check every constraint of a finalized catalog against collected values.

    parameters
    - catalog: Catalog (finalized); constraints are read through
      catalog.constraints(name), which includes the mirrored side of every
      ConflictsWith declaration.
    - values: Mapping[str, CollectedValue] holding the present arguments only.

    raises
    - MissingRequiredArgumentError: Required/RequiredUnless not satisfied.
    - ConflictingArgumentsError: both sides of a ConflictsWith are present.
    """
    for spec in catalog.all():
        for constraint in catalog.constraints(spec.name):
            match constraint:
                case Required():
                    if spec.name not in values:
                        raise MissingRequiredArgumentError(
                            "the required argument %r was not provided" % spec.signature,
                            title="missing required argument",
                            code=FaultCode.MISSING_REQUIRED_ARGUMENT,
                            argument=spec.name,
                            hint="supply %s" % spec.signature,
                        )
                case RequiredUnless(other):
                    if spec.name not in values and other not in values:
                        alternative = catalog.lookup(other)
                        raise MissingRequiredArgumentError(
                            "the required argument %r was not provided (nor was %r)" % (
                                spec.signature, alternative.signature
                            ),
                            title="missing required argument",
                            code=FaultCode.MISSING_REQUIRED_ARGUMENT,
                            argument=spec.name,
                            alternative=other,
                            hint="supply %s or %s" % (spec.signature, alternative.signature),
                        )
                case ConflictsWith(other):
                    if spec.name in values and other in values:
                        opponent = catalog.lookup(other)
                        raise ConflictingArgumentsError(
                            "the argument %r cannot be used with %r" % (spec.signature, opponent.signature),
                            title="conflicting arguments",
                            code=FaultCode.CONFLICTING_ARGUMENTS,
                            argument=spec.name,
                            other=other,
                            hint="drop either %s or %s" % (spec.signature, opponent.signature),
                        )
                case _:
                    raise TypeError("validate() unknown constraint %r on %r" % (constraint, spec.name))
        logger.debug("constraints satisfied for %r", spec.name)


__all__ = (
    "validate",
)
