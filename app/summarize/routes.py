"""
Summarize routes: upload/paste, start over, and workspace state.
"""
from flask import Blueprint, request, jsonify
import logging

from summarizer import SourceDocument
from app.utils import get_workspace_id, attach_workspace_cookie
from .services import SummarizeService

logger = logging.getLogger(__name__)


def _read_request_input():
    """Collect documents, pasted text and mode from form or JSON bodies."""
    if request.is_json:
        data = request.get_json(silent=True) or {}
        return [], data.get("text", ""), data.get("mode")

    documents = [
        SourceDocument.from_upload(upload)
        for upload in request.files.getlist("files")
        if upload and upload.filename
    ]
    return documents, request.form.get("text", ""), request.form.get("mode")


def create_summarize_routes(summarize_service: SummarizeService) -> Blueprint:
    """Create summarize routes."""
    bp = Blueprint('summarize', __name__)

    @bp.route("/api/summarize", methods=["POST"])
    def summarize():
        """Generate summaries for uploaded files and pasted text."""
        sid, is_new = get_workspace_id()
        documents, pasted_text, mode = _read_request_input()

        outcome = summarize_service.summarize(sid, documents, pasted_text, mode)

        response = jsonify(outcome.to_dict())
        response.status_code = outcome.status_code
        return attach_workspace_cookie(response, sid, is_new)

    @bp.route("/api/summarize/reset", methods=["POST"])
    def reset():
        """Start over: clear the workspace; late results are dropped."""
        sid, is_new = get_workspace_id()
        summarize_service.reset(sid)
        response = jsonify({"success": True, "state": summarize_service.get_state(sid)})
        return attach_workspace_cookie(response, sid, is_new)

    @bp.route("/api/summarize/state", methods=["GET"])
    def state():
        """Get the current workspace state."""
        sid, is_new = get_workspace_id()
        response = jsonify({"success": True, "state": summarize_service.get_state(sid)})
        return attach_workspace_cookie(response, sid, is_new)

    return bp
