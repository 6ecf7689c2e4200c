import logging
import os

from dotenv import load_dotenv
from flask import Flask, jsonify, render_template, request

from breed_api import DEFAULT_BREED_API_URL, fetch_breeds, get_contract
from directory import BreedDirectory
from translations import LANGUAGE_NAMES, get_labels, normalize_language

load_dotenv()


def _timeout(value):
    if value in (None, ""):
        return None
    value = float(value)
    return value if value > 0 else None


def load_config():
    return {
        "BREED_API_URL": os.getenv("BREED_API_URL", DEFAULT_BREED_API_URL),
        "BREED_API_CASING": os.getenv("BREED_API_CASING", "pascal"),
        "BREED_API_TIMEOUT": _timeout(os.getenv("BREED_API_TIMEOUT", "15")),
        "BREED_API_LANGUAGE_HEADER": os.getenv("BREED_API_LANGUAGE_HEADER", "Accept-Language"),
        "DEFAULT_LANGUAGE": normalize_language(os.getenv("DEFAULT_LANGUAGE", "en")),
    }


def get_directory(app, language=None):
    """The directory for a language; unknown or missing codes use DEFAULT_LANGUAGE."""
    code = normalize_language(language, default=app.config["DEFAULT_LANGUAGE"])
    return app.extensions["breed_directories"][code]


# ----------------- View -----------------
def render_content(state):
    """Loading indicator, error message, card grid or "no results", in that order."""
    return render_template(
        "_content.html",
        state=state,
        labels=get_labels(state.language),
    )


def _requested_directory(app):
    return get_directory(app, request.args.get("lang"))


def _search_term():
    return request.args.get("q", "")


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_mapping(load_config())
    if test_config:
        app.config.update(test_config)

    # Fail at startup on an unknown casing contract
    get_contract(app.config["BREED_API_CASING"])

    def fetcher(language):
        return fetch_breeds(
            app.config["BREED_API_URL"],
            language=language,
            casing=app.config["BREED_API_CASING"],
            timeout=app.config["BREED_API_TIMEOUT"],
            language_header=app.config["BREED_API_LANGUAGE_HEADER"],
        )

    # One fetched set per language, shared by every visitor reading it
    app.extensions["breed_directories"] = {
        code: BreedDirectory(fetcher, language=code) for code in LANGUAGE_NAMES
    }

    # ----------------- Flask Routes -----------------
    @app.route("/")
    def index():
        directory = _requested_directory(app)
        # A full page load is a mount: always fetch
        directory.mount()
        state = directory.view_state(_search_term())
        return render_template(
            "index.html",
            state=state,
            labels=get_labels(state.language),
            languages=LANGUAGE_NAMES,
            content=render_content(state),
        )

    @app.route("/breeds")
    def breeds_fragment():
        directory = _requested_directory(app)
        if directory.ensure_mounted():
            app.logger.info("Breed list fetched for language=%s", directory.language)
        return render_content(directory.view_state(_search_term()))

    @app.route("/api/breeds")
    def breeds_json():
        directory = _requested_directory(app)
        directory.ensure_mounted()
        state = directory.view_state(_search_term())
        payload = {
            "loading": state.loading,
            "error": state.error,
            "language": state.language,
            "count": len(state.filtered),
            "breeds": [breed.to_dict() for breed in state.filtered],
        }
        return jsonify(payload), (502 if state.error and not state.loading else 200)

    return app


app = create_app()

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(debug=os.getenv("FLASK_DEBUG", "false").lower() == "true")
