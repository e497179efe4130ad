"""Routes package for the message store."""


def register_routes(app):
    """Register all route blueprints with the application."""
    from .messages import messages_bp

    app.register_blueprint(messages_bp, url_prefix='/api/messages')
