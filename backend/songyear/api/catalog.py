from flask import Blueprint, current_app, jsonify, request

from songyear.errors import UpstreamUnavailable
from songyear.services.catalog import CatalogQuery

catalog = Blueprint('catalog', __name__)


@catalog.route('/itunes', methods=['GET'])
def itunes_search():
    term = request.args.get('term')
    if not term:
        return jsonify({'error': "Missing 'term' query parameter (e.g., ?term=eminem)"}), 400

    cfg = current_app.config
    try:
        limit = int(request.args.get('limit', cfg.get('CATALOG_RESULT_LIMIT', 10)))
    except ValueError:
        return jsonify({'error': "'limit' must be an integer"}), 400
    query = CatalogQuery(term=term, limit=limit, country=request.args.get('country') or cfg.get('CATALOG_COUNTRY'))

    try:
        tracks = current_app.extensions['itunes'].search(query)
    except UpstreamUnavailable as exc:
        current_app.logger.error(f"[itunes-proxy] term={term!r} error={exc}")
        status = exc.status if exc.status and exc.status >= 400 else 500
        return jsonify({'error': str(exc)}), status
    return jsonify({'songs': [t.to_dict() for t in tracks]})


@catalog.route('/album', methods=['GET'])
def deezer_album():
    album_id = request.args.get('id')
    if not album_id:
        return jsonify({'error': 'Album ID is missing in the query parameters (e.g., ?id=...)'}), 400

    try:
        payload, status = current_app.extensions['deezer'].album(album_id)
    except UpstreamUnavailable as exc:
        current_app.logger.error(f"[album-proxy] album={album_id} error={exc}")
        return jsonify({'error': str(exc)}), 500
    return jsonify(payload), status
