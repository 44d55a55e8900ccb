# app.py
"""
Flask application hosting the weather stripe widgets.
This is the main entry point: each route runs one widget script
(geocode, fetch, color, lay out) and serves the result as HTML for the
widget host, or as JSON.
"""

import logging
from flask import Flask, render_template, request, jsonify

from config import DEFAULT_CITY, LOG_LEVEL, HOST, PORT, DEBUG
from weather import fetch_coordinates, get_temperature_data, fetch_cloud_cover_forecast
from widget import (
    build_temperature_widget, build_cloud_widget, build_error_widget, to_dict,
    BACKGROUND, TITLE_GRADIENT, TITLE_SIZE, PADDING, SPACER,
)

logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
logger = logging.getLogger(__name__)

# Initialize Flask app
app = Flask(__name__)


def requested_city() -> str:
    """
    City from the query string, falling back to the configured default.
    """
    return request.args.get('city', '').strip() or DEFAULT_CITY


def temperature_run(city: str):
    """
    Run the temperature stripes script for a city.
    :return: (widget, data) tuple.
    """
    coord = fetch_coordinates(city)
    data = get_temperature_data(coord)
    return build_temperature_widget(city, data), data


def cloud_run(city: str):
    """
    Run the cloud stripes script for a city.
    :return: (widget, samples) tuple.
    """
    coord = fetch_coordinates(city)
    samples = fetch_cloud_cover_forecast(coord)
    return build_cloud_widget(city, samples), samples


def render_widget_html(widget, inline_css: bool = False) -> str:
    """
    Render a widget to an HTML page. Needs an app context.
    :param inline_css: Embed the stylesheet instead of linking it, for
        pages shown outside this server.
    """
    css = None
    if inline_css:
        with app.open_resource('static/widget.css', 'r') as f:
            css = f.read()
    return render_template(
        'widget.html',
        widget=widget,
        css=css,
        background=BACKGROUND,
        gradient=TITLE_GRADIENT,
        title_size=TITLE_SIZE,
        padding=PADDING,
        spacer=SPACER,
    )


def _html_response(run):
    city = requested_city()
    try:
        widget, _ = run(city)
    except Exception as e:
        logger.exception("Widget run for %s failed: %s", city, e)
        widget = build_error_widget(str(e))
    return render_widget_html(widget)


def _json_response(run, serialize):
    city = requested_city()
    try:
        widget, samples = run(city)
    except Exception as e:
        logger.exception("Widget run for %s failed: %s", city, e)
        return jsonify({'error': str(e)}), 502
    return jsonify({'city': city, 'widget': to_dict(widget), 'samples': serialize(samples)})


def _temperature_samples(data):
    return {
        'current': {'year': data.current.year, 'temperature': data.current.temperature},
        'historical': [{'year': s.year, 'temperature': s.temperature} for s in data.historical],
    }


def _cloud_samples(samples):
    return [{'time': s.time.isoformat(), 'cloud_cover': s.cloud_cover} for s in samples]


@app.route('/')
@app.route('/temperature')
def temperature_widget():
    """
    Temperature stripes: this hour today and on the same day in past years.
    """
    return _html_response(temperature_run)


@app.route('/clouds')
def cloud_widget():
    """
    Cloud stripes: hourly cloud-cover forecast from the current hour.
    """
    return _html_response(cloud_run)


@app.route('/api/temperature')
def temperature_api():
    return _json_response(temperature_run, _temperature_samples)


@app.route('/api/clouds')
def cloud_api():
    return _json_response(cloud_run, _cloud_samples)


if __name__ == '__main__':
    app.run(host=HOST, port=PORT, debug=DEBUG)
