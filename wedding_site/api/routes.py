from flask import Blueprint, Response, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from wedding_site.decorators import admin_required, get_services
from wedding_site.errors import NotFound, SiteError

api_bp = Blueprint("api", __name__, url_prefix="/api")


@api_bp.errorhandler(SiteError)
def handle_site_error(error):
    return jsonify({"error": error.message}), error.status_code


@api_bp.errorhandler(Exception)
def handle_unexpected_error(error):
    if isinstance(error, HTTPException):
        return jsonify({"error": error.description}), error.code
    current_app.logger.exception(f"Unhandled error on {request.method} {request.path}")
    return jsonify({"error": "Internal server error"}), 500


@api_bp.after_request
def add_cors_headers(response):
    response.headers["Access-Control-Allow-Origin"] = current_app.config.get("CORS_ORIGIN", "*")
    response.headers["Access-Control-Allow-Headers"] = "Content-Type, X-Admin-Password"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, DELETE, OPTIONS"
    return response


# --- Public ---

@api_bp.route("/config")
def get_config():
    return jsonify(get_services().config.public_view())


@api_bp.route("/rsvp", methods=["POST"])
def submit_rsvp():
    payload = request.get_json(silent=True) or {}
    record_id = get_services().rsvp.submit(payload)
    return jsonify({"success": True, "id": record_id})


# --- Admin ---

@api_bp.route("/admin/responses")
@admin_required
def list_responses():
    responses = get_services().admin.list_responses()
    return jsonify([r.to_dict() for r in responses])


@api_bp.route("/admin/responses/<record_id>", methods=["DELETE"])
@admin_required
def delete_response(record_id):
    try:
        record_id = int(record_id)
    except ValueError:
        raise NotFound("Response not found")
    get_services().admin.delete_response(record_id)
    return jsonify({"success": True})


@api_bp.route("/admin/export")
@admin_required
def export_csv():
    csv_text = get_services().admin.export_csv()
    current_app.logger.info("Exported RSVP responses as CSV")
    return Response(
        csv_text,
        mimetype="text/csv",
        headers={"Content-Disposition": "attachment; filename=rsvp-responses.csv"},
    )


@api_bp.route("/admin/stats")
@admin_required
def get_stats():
    return jsonify(get_services().admin.compute_stats())
