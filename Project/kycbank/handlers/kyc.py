from flask import Blueprint, current_app, g, jsonify, request

from kycbank.extensions import limiter
from kycbank.utils.bank.nigerian_banks import list_banks
from kycbank.utils.jwt_tokens.authentication import token_required
from kycbank.utils.verification_utils.errors import KycError, KycValidationError, ProviderError

kyc_bp = Blueprint("kyc", __name__, url_prefix="/api/kyc")


def _service():
    return current_app.extensions["kyc_service"]


def _resolve_limit():
    return current_app.config.get("KYC_RESOLVE_RATE_LIMIT", "10 per minute")


def _json_body():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise KycValidationError("Request body must be a JSON object")
    return data


@kyc_bp.errorhandler(KycError)
def handle_kyc_error(error):
    if isinstance(error, ProviderError):
        current_app.logger.error("KYC provider failure: %s", error)
    return jsonify({"error": str(error)}), error.status_code


@kyc_bp.route("/banks", methods=["GET"])
def banks():
    return jsonify({"banks": list_banks()}), 200


@kyc_bp.route("/customer", methods=["POST"])
@token_required
@limiter.limit(_resolve_limit)
def create_customer():
    data = _json_body()
    customer = {
        "email": data.get("email") or g.user_email,
        "first_name": data.get("first_name"),
        "last_name": data.get("last_name"),
        "phone": data.get("phone"),
    }

    result = _service().start(g.user_id, customer)
    return jsonify(result), 201


@kyc_bp.route("/bank/identify", methods=["GET"])
@token_required
@limiter.limit(_resolve_limit)
def identify_bank():
    account_number = request.args.get("account_number", "").strip()

    result = _service().identify_bank(account_number)
    return jsonify(result.to_dict()), 200


@kyc_bp.route("/bank/resolve", methods=["POST"])
@token_required
@limiter.limit(_resolve_limit)
def resolve_bank_account():
    data = _json_body()
    bank_account = {
        "bank_code": data.get("bank_code"),
        "country_code": data.get("country_code", "NG"),
        "account_number": data.get("account_number"),
        "account_name": data.get("account_name"),
    }

    result = _service().verify_bank_account(g.user_id, bank_account)
    return jsonify(result), 200


@kyc_bp.route("/bvn", methods=["POST"])
@token_required
@limiter.limit(_resolve_limit)
def verify_bvn():
    data = _json_body()
    bvn_data = {
        "bvn": data.get("bvn"),
        "first_name": data.get("first_name"),
        "last_name": data.get("last_name"),
        "middle_name": data.get("middle_name"),
    }

    result = _service().verify_bvn(g.user_id, bvn_data)
    return jsonify(result), 200


@kyc_bp.route("/status", methods=["GET"])
@token_required
def kyc_status():
    return jsonify(_service().status(g.user_id)), 200
