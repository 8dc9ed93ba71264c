from flask import request


def request_logging(app):
    @app.after_request
    def log_request(response):
        app.logger.debug(
            "%s %s -> %s", request.method, request.path, response.status_code
        )
        return response
