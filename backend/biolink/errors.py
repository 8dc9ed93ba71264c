from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from biolink.domain.exceptions import DomainError
from biolink.extensions import db

def register_error_handlers(app):
    @app.errorhandler(DomainError)
    def handle_domain_error(error):
        response = jsonify(error.to_dict())
        response.status_code = error.status_code
        return response

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(error):
        app.logger.exception("Database failure: %s", error)
        db.session.rollback()
        response = jsonify({
            "error": "ServiceUnavailable",
            "message": "Something went wrong. Please try again."
        })
        response.status_code = 503
        return response
