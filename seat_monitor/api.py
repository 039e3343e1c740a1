"""HTTP API for starting and stopping course checks."""
import logging
import threading
from flask import Flask, request, jsonify

from .models import StartResult, StopResult, WatchStatus, WatchTarget

logger = logging.getLogger(__name__)


class ApiServer:
    """Flask server that maps course check requests onto the registry."""

    def __init__(self, config, registry):
        """Initialize the API server."""
        self.config = config
        self.registry = registry
        self.app = Flask(__name__)
        self.server_thread = None
        self.running = False

        # Register routes
        self._register_routes()

    def _register_routes(self):
        """Register Flask routes."""

        @self.app.route('/start-course-check', methods=['POST'])
        def start_course_check():
            """Start polling a CRN on behalf of an email address."""
            email = request.values.get('email', '').strip()
            crn = request.values.get('CRN', '').strip()

            if not email or not crn:
                return jsonify({"error": "Email and CRN are required"}), 400

            target = WatchTarget(
                crn=crn,
                term=self.config.BANNER_TERM,
                interval=self.config.POLLING_INTERVAL)

            if self.registry.start(email, target) is StartResult.ALREADY_ACTIVE:
                return jsonify({"error": "A check is already running for this email"}), 400

            return jsonify({"message": f"Course availability check started for {email}"}), 200

        @self.app.route('/stop-course-check', methods=['POST'])
        def stop_course_check():
            """Stop the check running for an email address."""
            email = request.values.get('email', '').strip()
            if not email:
                return jsonify({"error": "Email is required"}), 400

            if self.registry.stop(email) is StopResult.NOT_FOUND:
                return jsonify({"error": "No active check found for this email"}), 400

            return jsonify({"message": f"Course check stopped for {email}"}), 200

        @self.app.route('/course-check-status', methods=['GET'])
        def course_check_status():
            """Report whether a check is running for an email address."""
            email = request.values.get('email', '').strip()
            if not email:
                return jsonify({"error": "Email is required"}), 400

            status = self.registry.status(email)
            code = 200 if status is WatchStatus.RUNNING else 404
            return jsonify({"email": email, "status": status.value}), code

        @self.app.route('/health', methods=['GET'])
        def health_check():
            """Health check endpoint."""
            return jsonify({
                "status": "ok",
                "active_checks": len(self.registry.active_keys()),
            }), 200

    def start(self):
        """Start the API server in a separate thread."""
        if self.running:
            logger.warning("API server is already running")
            return

        def run_server():
            logger.info("Starting API server on %s:%s",
                        self.config.API_HOST, self.config.API_PORT)
            self.app.run(
                host=self.config.API_HOST,
                port=self.config.API_PORT,
                debug=False,
                use_reloader=False,  # The reloader would fork a second registry
                threaded=True
            )

        self.server_thread = threading.Thread(target=run_server, name="api-server")
        # Make thread a daemon so it exits when main thread exits
        self.server_thread.daemon = True
        self.server_thread.start()
        self.running = True
        logger.info("API server thread started")
