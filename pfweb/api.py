from flask import Flask, jsonify, request
from passforms.errors import InvalidAlphabet, InvalidLength, PasswordError
from passforms.evaluator import evaluate
from passforms.generator import DEFAULT_ALPHABET, generate
from passforms.layout import keyboard_forms

app = Flask(__name__)

@app.errorhandler(PasswordError)
def password_error(e):
    return jsonify({'error': type(e).__name__, 'message': str(e)}), 400

@app.route('/')
def home():
    return jsonify({
        "message": "passforms API is running"
    })

@app.route('/assess', methods=['POST'])
def assess_route():
    data = request.get_json(silent=True) or {}
    password = data.get('password', '')
    result = evaluate(
        password,
        check_digits=data.get('check_digits', True),
        check_letters=data.get('check_letters', True),
    )
    return jsonify(result)

@app.route('/generate', methods=['POST'])
def generate_route():
    data = request.get_json(silent=True) or {}
    try:
        length = int(data.get('length', 8))
    except (TypeError, ValueError):
        raise InvalidLength(f"length must be an integer, {data.get('length')!r} given") from None
    alphabet = data.get('alphabet', DEFAULT_ALPHABET)
    if not isinstance(alphabet, str):
        raise InvalidAlphabet(f"alphabet must be a string, {alphabet!r} given")
    password = generate(
        length=length,
        alphabet=alphabet,
        check_digits=data.get('check_digits', True),
        check_letters=data.get('check_letters', True),
    )
    return jsonify({'password': password})

@app.route('/forms', methods=['POST'])
def forms_route():
    data = request.get_json(silent=True) or {}
    password = data.get('password', '')
    forms = keyboard_forms(password, data.get('lang', 'ru'))
    return jsonify({'forms': forms})

if __name__ == "__main__":
    app.run(debug=True)
