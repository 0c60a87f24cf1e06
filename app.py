import os
import logging

from flask import Flask
from config import CONFIG_BY_ENV
from routes import health_bp, booking_bp, guest_bp, room_bp

from models import db
from flask_migrate import Migrate
from utils.error_handler import register_error_handlers


def create_app(config_object=None):
    app = Flask(__name__)
    if config_object is None:
        config_object = CONFIG_BY_ENV.get(os.getenv("APP_ENV", "production").strip().lower(), CONFIG_BY_ENV["production"])
    app.config.from_object(config_object)
    app.logger.setLevel(getattr(logging, app.config.get("LOG_LEVEL", "INFO"), logging.INFO))

    # Register routes
    app.register_blueprint(health_bp)
    app.register_blueprint(booking_bp)
    app.register_blueprint(guest_bp)
    app.register_blueprint(room_bp)

    # Database init
    db.init_app(app)

    # Migrations
    Migrate(app, db)

    # Error normalizer; the runtime mode is fixed here, once
    register_error_handlers(app, expose_detail=app.config.get("EXPOSE_ERROR_DETAIL", False))

    @app.after_request
    def add_security_headers(resp):
        resp.headers["X-Content-Type-Options"] = "nosniff"
        resp.headers["X-Frame-Options"] = "DENY"
        resp.headers["Referrer-Policy"] = "no-referrer"
        # JSON-only API, nothing to load
        resp.headers["Content-Security-Policy"] = "default-src 'none'; frame-ancestors 'none';"
        return resp


    register_cli(app)


    return app

#-------------------------
import click
from models.guest import Guest
from models.room import Room

DEMO_ROOMS = [
    ("101", "single", 80.0),
    ("102", "double", 120.0),
    ("201", "suite", 250.0),
]

def register_cli(app):
    @app.cli.command("init-db")
    def init_db():
        """Create all tables (for local use without migrations)."""
        db.create_all()
        print("Database tables created")

    @app.cli.command("seed-demo")
    @click.option("--email", default="demo.guest@example.com", show_default=True)
    def seed_demo(email):
        """Insert a demo guest and a few rooms (safe & idempotent)."""
        email = email.strip().lower()
        if not Guest.query.filter_by(email=email).first():
            db.session.add(Guest(name="Demo Guest", email=email, phone="+10000000000"))

        existing = {r.number for r in Room.query.all()}
        for number, room_type, price in DEMO_ROOMS:
            if number not in existing:
                db.session.add(Room(number=number, type=room_type, price=price))
        db.session.commit()

        print(f"Seeded guest {email} and {len(DEMO_ROOMS)} rooms")

#-------------------------




if __name__ == "__main__":
    app = create_app()
    # Run locally
    app.run(host="127.0.0.1", port=5002)
