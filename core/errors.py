from typing import Any, Iterable


def field_errors(errors: Iterable[dict[str, Any]]) -> dict[str, str]:
    """Collapse pydantic errors into ``{field: message}``, first error per field.

    Model-level checks carry the offending field in ``ctx["field"]``; everything
    else is keyed by the last element of its location.
    """
    out: dict[str, str] = {}
    for err in errors:
        ctx = err.get("ctx") or {}
        loc = err.get("loc") or ()
        field = ctx.get("field") or (str(loc[-1]) if loc else "__root__")
        if err.get("type") == "value_error" and "error" in ctx:
            message = str(ctx["error"])
        else:
            message = err.get("msg", "")
        out.setdefault(field, message)
    return out
