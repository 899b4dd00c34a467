import logging

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from config import Config

allowed_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]
socketio = SocketIO(cors_allowed_origins=allowed_origins, async_mode=None)


def create_app(config_class=Config, catalog=None, rng=None):
    """Build the Flask app.

    ``catalog`` replaces the iTunes client (tests pass a fake); ``rng`` seeds
    track selection.
    """
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(getattr(logging, str(flask_app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO))

    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from songyear.services.catalog import CatalogQuery, DeezerCatalog, ItunesCatalog
    from songyear.services.game import RoundEngine, SessionStore

    cfg = flask_app.config
    timeout = int(cfg.get('CATALOG_TIMEOUT_SEC', 10))
    itunes = catalog or ItunesCatalog(base_url=cfg['ITUNES_BASE_URL'], timeout=timeout)
    query = CatalogQuery(
        term=cfg.get('CATALOG_SEARCH_TERM', 'pop'),
        limit=int(cfg.get('CATALOG_RESULT_LIMIT', 10)),
        country=cfg.get('CATALOG_COUNTRY'),
    )
    flask_app.extensions['itunes'] = itunes
    flask_app.extensions['deezer'] = DeezerCatalog(base_url=cfg['DEEZER_BASE_URL'], timeout=timeout)
    flask_app.extensions['round_engine'] = RoundEngine(SessionStore(), itunes, query, rng=rng)

    # Import and register blueprints here
    from songyear.main import main
    flask_app.register_blueprint(main)

    from songyear.api.catalog import catalog as catalog_bp
    flask_app.register_blueprint(catalog_bp, url_prefix='/api')

    from songyear.api.sessions import sessions
    flask_app.register_blueprint(sessions, url_prefix='/api/sessions')

    # Register Socket.IO event handlers
    from songyear.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    @click.command('catalog-search')
    @click.argument('term', required=False)
    @click.option('--limit', type=int, default=None, help='Max results to return.')
    @click.option('--country', default=None, help='Two-letter store country.')
    def catalog_search_command(term, limit, country):
        """Fetch a pool from the catalog and print each track with its year."""
        from songyear.errors import UpstreamUnavailable
        from songyear.services.game import extract_year

        q = CatalogQuery(
            term=term or query.term,
            limit=limit if limit is not None else query.limit,
            country=country or query.country,
        )
        try:
            tracks = itunes.search(q)
        except UpstreamUnavailable as exc:
            raise click.ClickException(str(exc))
        if not tracks:
            click.echo(f"No tracks found for '{q.term}'")
            return
        for t in tracks:
            year = extract_year(t.release_date)
            marker = '*' if year.was_fallback else ''
            click.echo(f"{year.year}{marker}\t{t.artist} - {t.title} ({t.album})")

    flask_app.cli.add_command(catalog_search_command)

    return flask_app
