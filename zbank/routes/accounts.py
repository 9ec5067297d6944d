from flask import Blueprint, jsonify, request

from zbank.db.session import get_session
from zbank.schemas import (
    account_to_dict,
    parse_create_account_request,
    parse_credentials,
    parse_transaction_request,
)
from zbank.services import account_service
from zbank.services.results import AccountError, ServiceResult

accounts_bp = Blueprint("accounts", __name__)

ERROR_STATUS = {
    AccountError.ACCOUNT_NOT_FOUND: 404,
    AccountError.INVALID_PIN: 401,
    AccountError.INSUFFICIENT_FUNDS: 409,
    AccountError.VALIDATION_FAILED: 400,
    AccountError.DUPLICATE_ACCOUNT: 400,
}


def error_response(error: AccountError, message: str):
    return jsonify({"status": "error", "error": error.value, "message": message}), ERROR_STATUS[error]


def _respond(result: ServiceResult, status_code: int = 200):
    if not result.ok:
        return error_response(result.error, result.message)
    return jsonify(account_to_dict(result.value)), status_code


@accounts_bp.route("/accounts/authenticate", methods=["POST"])
def authenticate():
    try:
        credentials = parse_credentials(request.get_json(silent=True))
    except ValueError as exc:
        return error_response(AccountError.VALIDATION_FAILED, str(exc))
    session = get_session()
    try:
        return _respond(account_service.authenticate(session, credentials["account_number"], credentials["pin"]))
    finally:
        session.close()


@accounts_bp.route("/accounts/<account_number>/balance", methods=["GET"])
def get_balance(account_number: str):
    session = get_session()
    try:
        return _respond(account_service.get_balance(session, account_number))
    finally:
        session.close()


@accounts_bp.route("/accounts/deposit", methods=["POST"])
def deposit():
    try:
        txn = parse_transaction_request(request.get_json(silent=True))
    except ValueError as exc:
        return error_response(AccountError.VALIDATION_FAILED, str(exc))
    session = get_session()
    try:
        return _respond(account_service.deposit(session, txn["account_number"], txn["pin"], txn["amount"]))
    finally:
        session.close()


@accounts_bp.route("/accounts/withdraw", methods=["POST"])
def withdraw():
    try:
        txn = parse_transaction_request(request.get_json(silent=True))
    except ValueError as exc:
        return error_response(AccountError.VALIDATION_FAILED, str(exc))
    session = get_session()
    try:
        return _respond(account_service.withdraw(session, txn["account_number"], txn["pin"], txn["amount"]))
    finally:
        session.close()


@accounts_bp.route("/accounts", methods=["GET"])
def list_accounts():
    session = get_session()
    try:
        result = account_service.list_accounts(session)
        return jsonify([account_to_dict(snapshot) for snapshot in result.value])
    finally:
        session.close()


@accounts_bp.route("/accounts", methods=["POST"])
def create_account():
    try:
        data = parse_create_account_request(request.get_json(silent=True))
    except ValueError as exc:
        return error_response(AccountError.VALIDATION_FAILED, str(exc))
    session = get_session()
    try:
        return _respond(account_service.create_account(session, data), status_code=201)
    finally:
        session.close()
