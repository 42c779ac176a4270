"""
Export routes: download the current summary as text or PDF.
"""
from io import BytesIO

from flask import Blueprint, request, jsonify, send_file
import logging

from summarizer import export_as_text, export_as_document

logger = logging.getLogger(__name__)

EXPORTERS = {
    "txt": export_as_text,
    "pdf": export_as_document,
}


def create_export_routes() -> Blueprint:
    """Create export routes."""
    bp = Blueprint('export', __name__)

    @bp.route("/api/export/<fmt>", methods=["POST"])
    def export_summary(fmt):
        """Render the posted summary and return it as an attachment."""
        exporter = EXPORTERS.get(fmt)
        if exporter is None:
            return jsonify({"success": False, "error": f"Unsupported export format: {fmt}"}), 404

        if request.is_json:
            summary = (request.get_json(silent=True) or {}).get("summary") or ""
        else:
            summary = request.form.get("summary", "")

        if not summary.strip():
            return jsonify({"success": False, "error": "There is no summary to export"}), 400

        try:
            exported = exporter(summary)
        except Exception as e:
            logger.exception(f"Failed to export summary as {fmt}")
            return jsonify({
                "success": False,
                "error": "Failed to export summary",
                "message": str(e)
            }), 500

        logger.info(f"Exported {exported.filename} ({exported.size} bytes)")
        return send_file(
            BytesIO(exported.content),
            mimetype=exported.mimetype,
            as_attachment=True,
            download_name=exported.filename,
        )

    return bp
