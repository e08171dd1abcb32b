# edgeblog/routes/__init__.py
from flask import Flask


def register_routes(app: Flask):
    """
    Registrar todos los blueprints de la carpeta routes.
    Llamá a register_routes(app) desde edgeblog.create_app().
    """
    # Import local para evitar problemas de import circular al inicializar la app
    from .auth import auth_bp
    from .post_routes import post_bp
    from .comment_routes import comment_bp
    from .admin_routes import admin_bp
    from .email_routes import email_bp
    app.register_blueprint(auth_bp)
    app.register_blueprint(post_bp)
    app.register_blueprint(comment_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(email_bp)
