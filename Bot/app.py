import os
import hmac

from flask import Flask, request, abort, jsonify
from botConfig import ConfigError, load_config
from labelEvent import parse_label_event
from mirrorTrigger import RemoteCallFailure, mirror_label_event

app = Flask(__name__)

# Signature headers GitHub may send and the only digest each one carries, newest first
signature_headers = [("X-Hub-Signature-256", "sha256"), ("X-Hub-Signature", "sha1")]


def verify_signature():
    # Validate that the request is from GitHub
    secret = os.getenv("GITHUB_WEBHOOK_SECRET")
    if not secret:
        print("GITHUB_WEBHOOK_SECRET is not set, refusing to process webhooks", flush=True)
        abort(500)

    for header, expected_digest in signature_headers:
        signature = request.headers.get(header)
        if signature is not None:
            break
    else:
        abort(403)

    sha_name, _, signature = signature.partition("=")
    if sha_name != expected_digest:
        abort(501)

    mac = hmac.new(secret.encode("utf-8"), msg=request.get_data(), digestmod=sha_name)

    if not hmac.compare_digest(str(mac.hexdigest()), str(signature)):
        abort(403)


def handle_label_event(payload_type, payload, config):
    event = parse_label_event(payload_type, payload)
    if event is None:
        return "ok"

    try:
        created = mirror_label_event(event, config)
    except RemoteCallFailure as e:
        print(f"Creating the docs issue failed: {e}", flush=True)
        abort(502, description=str(e))

    if created is None:
        return "ok"
    return jsonify(number=created.number, url=created.html_url), 201


@app.route("/webhook", methods=["POST"])
def bot():
    verify_signature()

    # Get the event payload, GitHub always sends a JSON object
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        abort(400)

    # Obtain the type of GitHub event
    payload_type = request.headers.get("X-GitHub-Event")

    # Check if the event is a ping or a GitHub App install/uninstall event
    if payload_type in ["ping", "installation", "installation_repositories"]:
        return "ok"

    # The config is read on every event so edits to config.json apply without a restart
    try:
        config = load_config()
    except ConfigError as e:
        print(f"Could not load the bot config: {e}", flush=True)
        abort(500)
    return handle_label_event(payload_type, payload, config)


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5001")))
