from flask import Flask, current_app
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from config import Config

socketio = SocketIO(cors_allowed_origins='*', async_mode=None)


def _parse_origins(value):
    if not value or value.strip() == '*':
        return '*'
    return [o.strip() for o in value.split(',') if o.strip()]


def get_game():
    """The live GameSession of the current app."""
    return current_app.extensions['trivia_game']


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    allowed_origins = _parse_origins(flask_app.config.get('CORS_ORIGINS'))
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from trivia.fanout import SocketIOFanout
    from trivia.services.game import GameSession
    from trivia.services.join.links import build_player_url

    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/')
    fanout = SocketIOFanout(socketio, namespace=namespace)
    flask_app.extensions['trivia_game'] = GameSession(
        fanout, max_name_length=int(flask_app.config.get('MAX_NAME_LENGTH', 20))
    )

    page_url = flask_app.config.get('PLAYER_PAGE_URL')

    from trivia.main import main
    flask_app.register_blueprint(main)

    from trivia.api.info import info
    flask_app.register_blueprint(info, url_prefix='/api')

    from trivia.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=namespace)

    @click.command('join-url')
    def join_url_command():
        """Prints the URLs players use to join."""
        from trivia.services.join.links import get_lan_ip, local_base_url, public_base_url
        local_base = local_base_url(get_lan_ip(), flask_app.config['PORT'])
        click.echo(f"Host:    http://localhost:{flask_app.config['PORT']}")
        click.echo(f"LAN:     {build_player_url(local_base, page_url)}")
        public_base = public_base_url(flask_app.config)
        if public_base:
            click.echo(f"Public:  {build_player_url(public_base, page_url)}")
        else:
            click.echo("Public:  (no relay configured; players must share the local network)")

    flask_app.cli.add_command(join_url_command)

    return flask_app
