"""JSON API for the equipment directory."""

import logging

from flask import current_app, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from modules.equipment.models import ALLOWED_STATUSES, DEFAULT_STATUS

from . import bp

logger = logging.getLogger(__name__)

MSG_BAD_ID = "Invalid equipment ID."
MSG_NOT_FOUND = "No equipment found with the given ID."
MSG_NAME_REQUIRED = "Equipment name is required."
MSG_BAD_STATUS = f"Status must be one of [{', '.join(ALLOWED_STATUSES)}]."

# signed 64-bit, the widest integer key the drivers bind
MAX_ID = 2**63 - 1


class InvalidInput(ValueError):
    """Request rejected before any storage access."""


@bp.errorhandler(InvalidInput)
def invalid_input(err: InvalidInput):
    return _message(str(err), 400)


# ---------- Утилиты ----------
def _message(text: str, status: int = 200):
    return jsonify(message=text), status


def _store():
    return current_app.extensions["equipment_store"]


def _payload() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _parse_id(raw: str) -> int:
    # только ASCII-цифры: int() принимает "+5", "1_0", " 5"
    if not (raw.isascii() and raw.isdigit()):
        raise InvalidInput(MSG_BAD_ID)
    equip_id = int(raw)
    if not 0 < equip_id <= MAX_ID:
        raise InvalidInput(MSG_BAD_ID)
    return equip_id


def _text(data: dict, key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise InvalidInput(f"'{key}' must be a string.")
    return value


def _check_status(status: str | None) -> None:
    if status not in ALLOWED_STATUSES:
        raise InvalidInput(MSG_BAD_STATUS)


# ---------- Список ----------
@bp.route("", methods=["GET"])
def list_equipment():
    try:
        rows = [eq.to_dict() for eq in _store().list_all()]
    except SQLAlchemyError:
        logger.exception("equipment list query failed")
        return _message("Failed to retrieve equipment list.", 500)
    return jsonify(rows)


# ---------- Регистрация ----------
@bp.route("", methods=["POST"])
def create_equipment():
    data = _payload()
    name = _text(data, "name")
    if not name or not name.strip():
        raise InvalidInput(MSG_NAME_REQUIRED)

    # пустой статус -> Normal
    status = _text(data, "status") or DEFAULT_STATUS
    _check_status(status)

    try:
        equip_id = _store().create(
            name=name,
            manager=_text(data, "manager"),
            status=status,
            location=_text(data, "location"),
        )
    except SQLAlchemyError:
        logger.exception("equipment insert failed")
        return _message("Failed to register equipment.", 500)

    logger.info("equipment registered", extra={"equip_id": equip_id})
    return _message("Equipment registered.", 201)


# ---------- Полное редактирование ----------
@bp.route("/<equip_id>", methods=["PUT"])
def update_equipment(equip_id: str):
    eid = _parse_id(equip_id)
    data = _payload()
    fields = {key: _text(data, key) for key in ("name", "manager", "status", "location")}
    # остальные поля пишутся как есть, без проверки на обязательность
    if fields["status"] is not None:
        _check_status(fields["status"])

    try:
        affected = _store().replace(eid, **fields)
    except SQLAlchemyError:
        logger.exception("equipment update failed", extra={"equip_id": eid})
        return _message("Failed to update equipment.", 500)

    if affected == 0:
        return _message(MSG_NOT_FOUND, 404)
    logger.info("equipment updated", extra={"equip_id": eid})
    return _message("Equipment updated.")


# ---------- Смена статуса ----------
@bp.route("/<equip_id>/status", methods=["PATCH"])
def change_status(equip_id: str):
    eid = _parse_id(equip_id)
    status = _text(_payload(), "status")
    _check_status(status)

    try:
        affected = _store().set_status(eid, status)
    except SQLAlchemyError:
        logger.exception("equipment status update failed", extra={"equip_id": eid})
        return _message("Failed to change equipment status.", 500)

    if affected == 0:
        return _message(MSG_NOT_FOUND, 404)
    logger.info("equipment status changed", extra={"equip_id": eid, "status": status})
    return _message("Equipment status changed.")


# ---------- Удаление ----------
@bp.route("/<equip_id>", methods=["DELETE"])
def delete_equipment(equip_id: str):
    eid = _parse_id(equip_id)

    try:
        affected = _store().delete(eid)
    except SQLAlchemyError:
        logger.exception("equipment delete failed", extra={"equip_id": eid})
        return _message("Failed to delete equipment.", 500)

    if affected == 0:
        return _message(MSG_NOT_FOUND, 404)
    logger.info("equipment deleted", extra={"equip_id": eid})
    return _message("Equipment deleted.")
