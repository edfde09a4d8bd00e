# Register all blueprints here
def register_blueprints(app):
    from .rent_roll import rent_roll_bp
    from .reports import reports_bp
    from .transactions import transactions_bp

    app.register_blueprint(rent_roll_bp)
    app.register_blueprint(reports_bp)
    app.register_blueprint(transactions_bp)
