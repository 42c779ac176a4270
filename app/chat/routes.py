"""
Chat routes for the follow-up assistant.
"""
from flask import Blueprint, request, jsonify
import logging

from .services import ChatService

logger = logging.getLogger(__name__)


def _session_payload(session_id: str, session, **extra) -> dict:
    payload = {"success": True, "session_id": session_id}
    payload.update(session.to_dict())
    payload.update(extra)
    return payload


def create_chat_routes(chat_service: ChatService) -> Blueprint:
    """Create chat routes."""
    bp = Blueprint('chat', __name__)

    def _not_found(session_id: str):
        return jsonify({"success": False, "error": f"Chat session {session_id} not found"}), 404

    @bp.route("/api/chat/sessions", methods=["POST"])
    def create_session():
        """Open a chat session seeded with the greeting."""
        try:
            session_id, session = chat_service.create_session()
        except Exception as e:
            logger.exception("Failed to create chat session")
            return jsonify({
                "success": False,
                "error": "Failed to start chat session",
                "message": str(e)
            }), 500
        return jsonify(_session_payload(session_id, session)), 201

    @bp.route("/api/chat/sessions/<session_id>", methods=["GET"])
    def get_session(session_id):
        """Get history and state of a chat session."""
        session = chat_service.get_session(session_id)
        if session is None:
            return _not_found(session_id)
        return jsonify(_session_payload(session_id, session))

    @bp.route("/api/chat/sessions/<session_id>/messages", methods=["POST"])
    def send_message(session_id):
        """Send a user message."""
        session = chat_service.get_session(session_id)
        if session is None:
            return _not_found(session_id)

        data = request.get_json(silent=True) or {}
        text = data.get("text") or ""
        message = session.send(text)
        return jsonify(_session_payload(
            session_id,
            session,
            accepted=message is not None,
            message=message.to_dict() if message else None
        ))

    @bp.route("/api/chat/sessions/<session_id>/retry", methods=["POST"])
    def retry_message(session_id):
        """Retry the most recent user message."""
        session = chat_service.get_session(session_id)
        if session is None:
            return _not_found(session_id)

        message = session.retry()
        return jsonify(_session_payload(
            session_id,
            session,
            accepted=message is not None,
            message=message.to_dict() if message else None
        ))

    @bp.route("/api/chat/sessions/<session_id>", methods=["DELETE"])
    def delete_session(session_id):
        """Tear down a chat session."""
        if not chat_service.delete_session(session_id):
            return _not_found(session_id)
        return jsonify({"success": True, "session_id": session_id})

    return bp
