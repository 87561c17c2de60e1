import logging

from flask import Flask, jsonify, request
from pydantic import ValidationError

from api.config import API_DEBUG, API_HOST, API_PORT, LOG_LEVEL
from api.schemas import (
    AccuracyRequest,
    CodingRequest,
    CommunicationRequest,
    NormalizeRequest,
    SectionRequest,
)
from assessment_core.alignment.aligner import align
from assessment_core.alignment.normalizer import normalize
from assessment_core.scoring.response_set import UnknownSectionError, score_response_set
from assessment_core.scoring.sections import score_coding_solutions
from communication.pipeline import assess_communication, assess_spoken_section
from communication.report import build_prompt_report

logger = logging.getLogger(__name__)

app = Flask(__name__)


def _parse(model):
    """Validate the JSON body against ``model``; raises ValidationError."""
    return model.model_validate(request.get_json(silent=True) or {})


@app.errorhandler(ValidationError)
def handle_validation_error(e):
    logger.warning("Rejected %s: %d validation error(s)", request.path, e.error_count())
    return jsonify({"error": "Invalid request", "details": e.errors(include_url=False, include_context=False)}), 400


@app.errorhandler(UnknownSectionError)
def handle_unknown_section(e):
    return jsonify({"error": str(e)}), 400


# ============================================================================
# ROUTES - HEALTH
# ============================================================================
@app.route('/health', methods=['GET'])
def health_check():
    return jsonify({"status": "ok"})


# ============================================================================
# ROUTES - TEXT COMPARISON
# ============================================================================
@app.route('/api/normalize', methods=['POST'])
def normalize_text():
    data = _parse(NormalizeRequest)
    return jsonify({"text": data.text, "normalized": normalize(data.text)})


@app.route('/api/accuracy', methods=['POST'])
def accuracy():
    """Word accuracy of one recognized transcript against its reference."""
    data = _parse(AccuracyRequest)
    result = align(data.reference, data.hypothesis)
    return jsonify({
        "accuracy": result.accuracy,
        "word_error_rate": result.word_error_rate,
        "edit_distance": result.edit_distance,
        "reference_token_count": result.reference_token_count,
        "hypothesis_token_count": result.hypothesis_token_count,
        "report": build_prompt_report(data.reference, data.hypothesis),
    })


# ============================================================================
# ROUTES - SCORING
# ============================================================================
@app.route('/api/score/section', methods=['POST'])
def score_section():
    """Score a speaking/listening section by name, or with an explicit policy."""
    data = _parse(SectionRequest)
    if data.section is not None:
        return jsonify(assess_spoken_section(data.section, data.expected, data.actual))

    score = score_response_set(data.expected, data.actual, data.max_points, data.min_attempt_length)
    return jsonify({"score": score, "max_score": data.max_points})


@app.route('/api/score/communication', methods=['POST'])
def score_communication():
    data = _parse(CommunicationRequest)
    result = assess_communication(
        data.self_intro_transcript,
        data.speaking_transcripts,
        data.listening_transcripts,
        data.essay,
        data.expected_listening_texts,
        data.expected_speaking_texts,
        writing_topic=data.writing_topic,
    )
    return jsonify(result)


@app.route('/api/score/coding', methods=['POST'])
def score_coding():
    data = _parse(CodingRequest)
    results = score_coding_solutions(data.as_dicts())
    return jsonify({
        "results": results,
        "total": sum(r["score"] for r in results),
    })


if __name__ == '__main__':
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app.run(debug=API_DEBUG, host=API_HOST, port=API_PORT)
