"""
Flask binding for the great-circle operations.

Requires the optional web extra: pip install greatcircle[web]
"""

__all__ = ['create_app']

from typing import Any, Dict, Mapping, Optional

from flask import Flask, jsonify, request

from greatcircle import endpoints
from greatcircle._const import EARTH_RADIUS_METERS

DEFAULT_CONFIG = {
    'DEFAULT_BODY_RADIUS': EARTH_RADIUS_METERS,
    'LEGACY_COLATITUDE': False,
    'LEGACY_AREA': True,
}


def _request_data() -> Dict[str, Any]:
    """Query string, form fields and JSON object body merged; JSON wins"""
    data: Dict[str, Any] = request.values.to_dict()
    body = request.get_json(silent=True)
    if isinstance(body, dict):
        data.update(body)

    return data


def _respond(result: endpoints.OperationResult):
    return jsonify(result.payload), result.status


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """
    Builds the application.

    Settings are read from DEFAULT_CONFIG, then GREATCIRCLE_* environment
    variables (values parsed as JSON, e.g. GREATCIRCLE_LEGACY_AREA=false),
    then the supplied config mapping.
    """
    app = Flask(__name__)
    app.config.from_mapping(DEFAULT_CONFIG)
    app.config.from_prefixed_env('GREATCIRCLE')
    if config:
        app.config.from_mapping(config)

    def body_radius() -> float:
        return float(app.config['DEFAULT_BODY_RADIUS'])

    @app.route('/haversine', methods=['GET', 'POST'])
    def haversine():
        return _respond(endpoints.haversine(_request_data(), body_radius()))

    @app.route('/vincenty', methods=['GET', 'POST'])
    def vincenty():
        return _respond(endpoints.vincenty(_request_data(), body_radius()))

    @app.route('/azimuth', methods=['GET', 'POST'])
    def azimuth():
        return _respond(endpoints.azimuth(
            _request_data(),
            legacy_colatitude=bool(app.config['LEGACY_COLATITUDE']),
        ))

    @app.route('/distance-to-poles', methods=['GET', 'POST'])
    def distance_to_poles():
        return _respond(endpoints.distance_to_poles(
            _request_data(),
            legacy_area=bool(app.config['LEGACY_AREA']),
        ))

    return app


if __name__ == '__main__':
    # For development only - use a proper WSGI server in production
    create_app().run(debug=True, host='0.0.0.0', port=5000)
