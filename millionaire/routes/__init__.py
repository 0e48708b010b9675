from .auth_routes import auth_bp
from .public_routes import public_bp
from .user_routes import user_bp
from .game_routes import game_bp

def register_routes(app):
    app.register_blueprint(auth_bp)
    app.register_blueprint(public_bp)
    app.register_blueprint(user_bp, url_prefix="/users")
    app.register_blueprint(game_bp, url_prefix="/games")
