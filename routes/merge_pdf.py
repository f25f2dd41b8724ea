from flask import Blueprint, current_app, request, send_file, jsonify
import io
import logging

from merger import MergeError, merge_pdfs
from routes.uploads import UploadValidationError, receive_uploads, upload_scope

logger = logging.getLogger(__name__)

merge_pdf_bp = Blueprint("merge_pdf", __name__, url_prefix="/api")

MERGE_FAILED = "An error occurred during PDF merging."


@merge_pdf_bp.route("/merge", methods=["POST"])
def merge():
    logger.info("Merge request received.")
    cfg = current_app.config

    with upload_scope(cfg["UPLOAD_FOLDER"]) as uploads:
        try:
            receive_uploads(
                request.files.getlist(cfg["PDF_FIELD_NAME"]),
                uploads,
                cfg["UPLOAD_FOLDER"],
                max_files=cfg["MAX_PDF_FILES"],
            )
        except UploadValidationError as e:
            return jsonify({"message": str(e)}), 400
        except OSError:
            logger.exception("Could not store uploaded files")
            return jsonify({"message": MERGE_FAILED}), 500

        try:
            output = merge_pdfs([u.path for u in uploads])
        except MergeError:
            logger.exception("PDF Processing Error")
            return jsonify({"message": MERGE_FAILED}), 500

        response = send_file(io.BytesIO(output), mimetype="application/pdf")
        response.headers["Content-Disposition"] = f'attachment; filename="{cfg["MERGED_FILENAME"]}"'
        return response
