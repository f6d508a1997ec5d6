import logging
import threading
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS

from domain.commands import handle_key_press, set_new_direction
from domain.simulation import Simulation
from services.renderer import render_css_rows, score_text
from settings import get_allowed_origins, get_tick_interval_ms, load_game_config, make_rng

logger = logging.getLogger(__name__)


def _state_payload(simulation: Simulation, **extra):
    state = simulation.state
    payload = {
        "state": state.to_dict(),
        "cells": render_css_rows(state, simulation.board_size),
        "score": score_text(state),
        "tick": simulation.tick_count,
    }
    payload.update(extra)
    return payload


def create_app(simulation: Optional[Simulation] = None) -> Flask:
    """
    Build the Flask app serving the browser game.

    The page polls POST /api/tick every tick_interval_ms and repaints from
    the returned cells; key presses and the on-screen buttons go to
    POST /api/direction.

    Every route that touches the simulation holds SIMULATION_LOCK, so ticks,
    direction changes and resets stay ordered under a threaded server.
    """
    app = Flask(__name__)

    if simulation is None:
        simulation = Simulation(rng=make_rng(), config=load_game_config())
    app.config["SIMULATION"] = simulation
    lock = threading.Lock()
    app.config["SIMULATION_LOCK"] = lock
    app.config["TICK_INTERVAL_MS"] = get_tick_interval_ms()

    # Enable CORS for API routes so a separately hosted page can call Flask
    CORS(app, resources={r"/api/*": {"origins": get_allowed_origins()}})

    simulation.game_over_listeners.append(
        lambda state: logger.info(f"Game over with score {state.score}")
    )

    @app.route("/", methods=["GET"])
    def index():
        return app.send_static_file("index.html")

    @app.route("/api/state", methods=["GET"])
    def get_state():
        with lock:
            payload = _state_payload(simulation, tick_interval_ms=app.config["TICK_INTERVAL_MS"])
        return jsonify(payload)

    @app.route("/api/direction", methods=["POST"])
    def post_direction():
        """
        Change the snake's direction.

        Body: {"key": "ArrowLeft"} for keyboard input, or
              {"direction": "LEFT"} for the on-screen buttons.
        Unrecognised input is accepted and ignored.
        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400

        if "key" not in data and "direction" not in data:
            return jsonify({"error": "Expected 'key' or 'direction'"}), 400

        with lock:
            snake = simulation.state.snake
            if "key" in data:
                changed = handle_key_press(snake, data["key"])
            else:
                changed = set_new_direction(snake, data["direction"])
            direction = list(snake.direction)

        return jsonify({"changed": changed, "direction": direction})

    @app.route("/api/tick", methods=["POST"])
    def post_tick():
        try:
            with lock:
                result = simulation.tick()
                payload = _state_payload(
                    simulation,
                    food_eaten=result.food_eaten,
                    terminal=result.terminal,
                )
            return jsonify(payload)
        except Exception as error:
            logging.error(f"Error advancing game: {error}")
            return jsonify({"error": "Failed to advance game"}), 500

    @app.route("/api/reset", methods=["POST"])
    def post_reset():
        with lock:
            simulation.reset()
            payload = _state_payload(simulation)
        return jsonify(payload)

    return app


app = create_app()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(debug=False)
