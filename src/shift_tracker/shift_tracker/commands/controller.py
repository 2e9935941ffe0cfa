from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from .dispatcher import GENERIC_FAILURE

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    """Webhook a chat gateway posts inbound messages to.

    Permission checks stay with the chat platform: it tells us whether the
    caller is an admin via `is_admin`.
    """

    @app.route("/commands", methods=["POST"], endpoint="commands")
    def commands():
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return jsonify({"ok": False, "reply": "Expected a JSON object"}), 400

        identity = str(payload.get("identity") or "").strip()
        text = str(payload.get("text") or "")
        if not identity:
            return jsonify({"ok": False, "reply": "identity is required"}), 400

        try:
            reply = container.dispatcher.handle(
                identity,
                str(payload.get("display_name") or identity),
                text,
                is_admin=payload.get("is_admin") is True,
            )
        except Exception:
            logger.exception("Unhandled error while dispatching %r", text)
            return jsonify({"ok": False, "reply": GENERIC_FAILURE}), 500

        if reply is None:
            return "", 204
        return jsonify({"ok": reply.ok, "reply": reply.text})

    @app.route("/ping", methods=["GET"], endpoint="ping")
    def ping():
        stats = container.engine.admin_stats()
        return jsonify(
            {
                "status": "online",
                "staff": stats.staff_count,
                "shifts": stats.total_shifts,
                "active": stats.active_count,
            }
        )
