"""Growth rate query API.

Read-only JSON endpoints over the registry held by the app:

  GET  /api/growth_rates                       list of curves
  GET  /api/growth_rates/<id>                  one curve with its level table
  GET  /api/growth_rates/<id>/exp?level=N      minimum Exp for a level
  GET  /api/growth_rates/<id>/level?exp=N      level for an Exp amount
  POST /api/growth_rates/<id>/add_exp          {"exp": int, "gain": int}

Errors are returned as ``{"error": <code>}`` with a 4xx/5xx status.
"""

from flask import Blueprint, current_app, jsonify, request

from growthrates import settings
from growthrates.errors import (
    CurveIntegrityError,
    InvalidExpError,
    InvalidLevelError,
    MissingFormulaError,
    NotFoundError,
)
from growthrates.logging_utils import get_logger

bp_growth = Blueprint("growth_api", __name__)
_log = get_logger("growth_api")


def _registry():
    return current_app.extensions["growth_rates"]


def _max_level() -> int:
    configured = current_app.config.get("MAXIMUM_LEVEL")
    return configured if configured is not None else settings.max_level()


def _int_arg(raw, error_cls):
    """Coerce a query/body value to int, raising ``error_cls`` on failure."""
    if isinstance(raw, bool):
        raise error_cls(raw)
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        raise error_cls(raw) from None


def _summary(growth_rate, max_level):
    return {
        "id": growth_rate.id,
        "name": growth_rate.name,
        "has_formula": growth_rate.has_formula,
        "max_level": max_level,
        "maximum_exp": growth_rate.maximum_exp(max_level=max_level),
    }


@bp_growth.errorhandler(NotFoundError)
def _not_found(e):
    return jsonify({"error": "not_found"}), 404


@bp_growth.errorhandler(InvalidLevelError)
def _invalid_level(e):
    return jsonify({"error": "invalid_level"}), 400


@bp_growth.errorhandler(InvalidExpError)
def _invalid_exp(e):
    return jsonify({"error": "invalid_exp"}), 400


@bp_growth.errorhandler(MissingFormulaError)
def _missing_formula(e):
    _log.error(event="missing_formula", id=e.growth_rate_id, requested_level=e.level)
    return jsonify({"error": "missing_formula"}), 500


@bp_growth.errorhandler(CurveIntegrityError)
def _curve_integrity(e):
    _log.error(event="curve_integrity", detail=str(e))
    return jsonify({"error": "curve_integrity"}), 500


@bp_growth.route("/api/growth_rates")
def api_list_growth_rates():
    """
    Return every registered growth rate in registration order.
    Response: [ {id, name, has_formula, max_level, maximum_exp}, ... ]
    """
    max_level = _max_level()
    return jsonify([_summary(g, max_level) for g in _registry()])


@bp_growth.route("/api/growth_rates/<growth_rate_id>")
def api_growth_rate(growth_rate_id):
    """
    Return one growth rate and its full level table.
    Response: {id, name, has_formula, max_level, maximum_exp, table: [{level, exp}, ...]}
    """
    growth_rate = _registry().get(growth_rate_id)
    max_level = _max_level()
    data = _summary(growth_rate, max_level)
    data["table"] = [{"level": lvl, "exp": exp} for lvl, exp in growth_rate.exp_table(max_level=max_level)]
    return jsonify(data)


@bp_growth.route("/api/growth_rates/<growth_rate_id>/exp")
def api_minimum_exp(growth_rate_id):
    growth_rate = _registry().get(growth_rate_id)
    level = _int_arg(request.args.get("level"), InvalidLevelError)
    minimum = growth_rate.minimum_exp_for_level(level, max_level=_max_level())
    return jsonify({"id": growth_rate.id, "level": level, "minimum_exp": minimum})


@bp_growth.route("/api/growth_rates/<growth_rate_id>/level")
def api_level_from_exp(growth_rate_id):
    growth_rate = _registry().get(growth_rate_id)
    exp = _int_arg(request.args.get("exp"), InvalidExpError)
    max_level = _max_level()
    level = growth_rate.level_from_exp(exp, max_level=max_level)
    return jsonify(
        {
            "id": growth_rate.id,
            "exp": exp,
            "level": level,
            "exp_to_next_level": growth_rate.exp_to_next_level(exp, max_level=max_level),
        }
    )


@bp_growth.route("/api/growth_rates/<growth_rate_id>/add_exp", methods=["POST"])
def api_add_exp(growth_rate_id):
    """Add ``gain`` to ``exp`` and clamp the result to the curve's range.

    Body JSON: { "exp": <int>, "gain": <int> }  (gain may be negative)
    Response: { "id", "exp", "level" }
    """
    growth_rate = _registry().get(growth_rate_id)
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        raise InvalidExpError(data)
    exp = _int_arg(data.get("exp", 0), InvalidExpError)
    gain = _int_arg(data.get("gain", 0), InvalidExpError)
    if exp < 0:
        raise InvalidExpError(exp)
    max_level = _max_level()
    total = growth_rate.add_exp(exp, gain, max_level=max_level)
    return jsonify({"id": growth_rate.id, "exp": total, "level": growth_rate.level_from_exp(total, max_level=max_level)})
