from flask import Flask, current_app
from flask_cors import CORS
import click
import logging
from config import Config


def get_store():
    """Scoreboard store owned by the current app."""
    return current_app.extensions['scoreboard']


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    logging.getLogger(__name__).setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    CORS(flask_app, origins=flask_app.config.get('CORS_ALLOWED_ORIGINS', []))

    # One store per app instance; lives until reset or process exit
    from scoreboard.services.board import ScoreboardStore
    flask_app.extensions['scoreboard'] = ScoreboardStore(
        reorder_on_summary=flask_app.config.get('SCOREBOARD_REORDER_ON_SUMMARY', True)
    )

    # Import and register blueprints here
    from scoreboard.main import main
    flask_app.register_blueprint(main)

    from scoreboard.api.matches import matches
    flask_app.register_blueprint(matches, url_prefix=flask_app.config.get('SCOREBOARD_URL_PREFIX', '/vk/scoreboard'))

    @click.command('scoreboard-demo')
    def scoreboard_demo_command():
        """Seeds a fresh board with sample matches and prints the summary."""
        demo = ScoreboardStore()
        fixtures = [
            ('Uruguay', 'Italy', 6, 6),
            ('Spain', 'Brazil', 10, 2),
            ('Mexico', 'Canada', 0, 5),
            ('Argentina', 'Australia', 3, 1),
            ('Germany', 'France', 2, 2),
        ]
        for home, away, home_score, away_score in fixtures:
            position = demo.start_match(home, away)
            demo.update_score(position, home_score, away_score)
        for line in demo.get_formatted_summary():
            click.echo(line)

    flask_app.cli.add_command(scoreboard_demo_command)

    return flask_app
