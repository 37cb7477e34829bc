import logging

from flask import Flask, jsonify, request

from passgauge.config import load_config
from passgauge.evaluator import analyze_password
from passgauge.generator import generate_passphrase, generate_random_password

logger = logging.getLogger(__name__)

app = Flask(__name__)
CFG = load_config()


def _int_field(data, key, default, maximum):
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer")
    if value > maximum:
        raise ValueError(f"{key} must be <= {maximum}")
    return value


@app.route('/')
def home():
    return jsonify({
        "message": "PassGauge API is running"
    })

@app.route('/analyze', methods=['POST'])
def analyze_route():
    data = request.get_json(silent=True) or {}
    password = data.get('password', '')
    if not isinstance(password, str):
        return jsonify({'error': 'password must be a string'}), 400
    return jsonify(analyze_password(password).as_dict())

@app.route('/generate', methods=['POST'])
def generate_route():
    data = request.get_json(silent=True) or {}
    try:
        length = _int_field(data, 'length', int(CFG["random_length"]), int(CFG["max_random_length"]))
        password = generate_random_password(length)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify({'password': password})

@app.route('/passphrase', methods=['POST'])
def passphrase_route():
    data = request.get_json(silent=True) or {}
    try:
        words = _int_field(data, 'words', int(CFG["passphrase_words"]), int(CFG["max_passphrase_words"]))
        passphrase = generate_passphrase(words)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify({'passphrase': passphrase})

if __name__ == "__main__":
    app.run(debug=True)
