import os

from flask import Flask

from config import Config
from extensions import db, socketio
from millionaire.commands import register_commands
from millionaire.routes import register_routes
from millionaire.sockets import register_sockets
from millionaire.utils.logging_config import configure_logging


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    db.init_app(app)
    socketio.init_app(app)

    register_routes(app)
    register_sockets(socketio)
    register_commands(app)

    with app.app_context():
        db.create_all()

    return app


if __name__ == "__main__":
    app = create_app()
    port = int(os.getenv("PORT", 5000))
    app.logger.info("MILLIONAIRE QUIZ READY ON port %s", port)
    socketio.run(app, host="0.0.0.0", port=port, debug=os.getenv("FLASK_DEBUG") == "1")
