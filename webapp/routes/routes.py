# --------------------------------------------------------------
#  routes.py
# --------------------------------------------------------------
from __future__ import annotations

from logging import Logger
from typing import Any, Tuple, Union

from flask import Blueprint, Response, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from msavalidator import MSAError, NoDataError, ParseError
from webapp.routes.helpers import parse_field_count, parse_msa_upload
from webapp.services.msa import SessionStore, UnknownSessionError

bp = Blueprint("main", __name__)

JsonResult = Union[Response, Tuple[Response, int]]


def _sessions() -> SessionStore:
    return current_app.extensions["msa_sessions"]


@bp.route("/about")
def about() -> Response:
    """Simple health-check / about endpoint."""
    return jsonify(
        {"about": "MSA validator API backend. Upload a FASTA alignment to a session."}
    )


# ----------------------------------------------------------------------
# Sessions
# ----------------------------------------------------------------------


@bp.route("/sessions", methods=["POST"])
def create_session() -> JsonResult:
    session_id = _sessions().create()
    current_app.logger.info("[sessions] Created session %s", session_id)
    return jsonify({"session_id": session_id}), 201


@bp.route("/sessions/<session_id>", methods=["DELETE"])
def delete_session(session_id: str) -> Tuple[str, int]:
    _sessions().delete(session_id)
    current_app.logger.info("[sessions] Deleted session %s", session_id)
    return "", 204


# ----------------------------------------------------------------------
# Main business endpoint – alignment upload
# ----------------------------------------------------------------------


@bp.route("/sessions/<session_id>/msa", methods=["POST"])
def upload_msa(session_id: str) -> JsonResult:
    log: Logger = current_app.logger
    log.info("[msa] POST upload for session %s from %s", session_id, request.remote_addr)

    content = parse_msa_upload(request)
    log.info(f"[msa] Received {len(content)} bytes")

    with _sessions().use(session_id) as msa:
        msa.set_seqs(content)
        response_data = {
            "session_id": session_id,
            "sequence_count": msa.get_seq_count(),
            "alignment_width": msa.alignment_width,
        }

    log.info(
        f"[msa] Loaded {response_data['sequence_count']} sequences "
        f"of width {response_data['alignment_width']}"
    )
    return jsonify(response_data)


# ----------------------------------------------------------------------
# Queries
# ----------------------------------------------------------------------


@bp.route("/sessions/<session_id>/count")
def sequence_count(session_id: str) -> JsonResult:
    with _sessions().use(session_id) as msa:
        count = msa.get_seq_count()
    return jsonify({"sequence_count": count})


@bp.route("/sessions/<session_id>/headers")
def check_headers(session_id: str) -> JsonResult:
    fields = parse_field_count(request)
    with _sessions().use(session_id) as msa:
        problems = msa.check_headers(fields)

    current_app.logger.info(
        f"[headers] {len(problems)} headers without {fields} fields in {session_id}"
    )
    return jsonify(
        {
            "expected_field_count": fields,
            "problem_headers": [problem.to_dict() for problem in problems],
        }
    )


@bp.route("/sessions/<session_id>/fasta")
def fasta(session_id: str) -> Response:
    with _sessions().use(session_id) as msa:
        text = msa.get_seqs()
    return Response(text, mimetype="text/x-fasta")


# ----------------------------------------------------------------------
# Error handlers
# ----------------------------------------------------------------------


@bp.errorhandler(ParseError)
def parse_error(exc: ParseError) -> JsonResult:
    current_app.logger.warning(f"[msa] Rejected alignment: {exc}")
    return _fail(400, str(exc), exc.kind), 400


@bp.errorhandler(NoDataError)
def no_data_error(exc: NoDataError) -> JsonResult:
    current_app.logger.warning(f"[msa] Query without alignment: {exc}")
    return _fail(409, str(exc), exc.kind), 409


@bp.errorhandler(MSAError)
def msa_error(exc: MSAError) -> JsonResult:
    current_app.logger.error("[msa] Unexpected alignment error", exc_info=True)
    return _fail(500, str(exc), exc.kind), 500


@bp.errorhandler(UnknownSessionError)
def unknown_session(exc: UnknownSessionError) -> JsonResult:
    current_app.logger.warning(f"[sessions] {exc}")
    return _fail(404, str(exc)), 404


@bp.errorhandler(ValueError)
def bad_request(exc: ValueError) -> JsonResult:
    current_app.logger.warning(f"[request] Bad request: {exc}")
    return _fail(400, str(exc)), 400


@bp.errorhandler(HTTPException)
def http_error(exc: HTTPException) -> JsonResult:
    status = exc.code or 500
    return _fail(status, exc.description or exc.name), status


@bp.errorhandler(Exception)
def global_error(exc: Exception) -> JsonResult:
    current_app.logger.error("[global] Unhandled exception", exc_info=True)
    return _fail(500, str(exc)), 500


# ----------------------------------------------------------------------
# Utility: short error JSON helper
# ----------------------------------------------------------------------
def _fail(status_code: int, message: str, kind: str | None = None) -> Response:
    payload: dict[str, Any] = {
        "error": message,
        "status": status_code,
    }
    if kind is not None:
        payload["kind"] = kind
    return jsonify(payload)
