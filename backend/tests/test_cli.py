from conftest import make_track


def test_catalog_search_prints_years(flask_app, catalog):
    catalog.tracks = [make_track('Known', 1999), make_track('Odd', release_date='garbage')]
    runner = flask_app.test_cli_runner()
    result = runner.invoke(args=['catalog-search', 'eminem', '--limit', '2'])
    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert lines[0].startswith('1999\t')
    # Fallback years are flagged
    assert '*\t' in lines[1]
    assert catalog.queries[-1].term == 'eminem'
    assert catalog.queries[-1].limit == 2


def test_catalog_search_reports_upstream_failure(flask_app, catalog):
    catalog.fail_with(status=503)
    result = flask_app.test_cli_runner().invoke(args=['catalog-search'])
    assert result.exit_code != 0
    assert 'iTunes API returned an error' in result.output


def test_catalog_search_empty(flask_app, catalog):
    catalog.tracks = []
    result = flask_app.test_cli_runner().invoke(args=['catalog-search', 'zzzz'])
    assert result.exit_code == 0
    assert "No tracks found for 'zzzz'" in result.output
