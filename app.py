import logging
from datetime import datetime
from typing import Callable, Optional

from flask import Flask, render_template, request, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from availability import AvailabilityGate, STATUS_MAINTENANCE, STATUS_OUTSIDE_HOURS
from config import Settings, load_settings
from lookup import CredentialValidator, RecordFinder
from sheet_handler import SheetHandler, SheetFetchError

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None,
               sheet_handler: Optional[SheetHandler] = None,
               clock: Optional[Callable[[], datetime]] = None) -> Flask:
    if settings is None:
        settings = load_settings()

    # Set up logging
    logging.basicConfig(level=settings.log_level)

    app = Flask(__name__, static_folder='static', static_url_path='')
    app.config['SETTINGS'] = settings
    CORS(app)

    # Initialize handlers
    sheet_handler = sheet_handler or SheetHandler(timeout=settings.sheet_timeout)
    gate = AvailabilityGate(settings, clock=clock)
    validator = CredentialValidator(sheet_handler, settings.database_sheet_url)
    record_finder = RecordFinder(sheet_handler, settings.records_sheet_url)

    @app.before_request
    def check_availability():
        blocked = gate.check(request.path)
        if blocked is not None:
            return jsonify(blocked), 503
        return None

    @app.route('/api/validate', methods=['POST'])
    def validate():
        """Check a student ID and phone number against the database sheet"""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        student_id = data.get('id')
        phone = data.get('phone')

        if not student_id or not phone:
            return jsonify({
                'success': False,
                'message': 'ID and Phone are required'
            }), 400

        try:
            user = validator.validate(student_id, phone)
        except SheetFetchError as e:
            logger.error(f"Validation error: {str(e)}")
            return jsonify({
                'success': False,
                'message': 'Server error during validation'
            }), 500

        if user is None:
            return jsonify({
                'success': False,
                'message': 'Either the ID or the Phone is Wrong'
            }), 401

        return jsonify({'success': True, 'user': user.to_dict()})

    @app.route('/api/records/<student_id>')
    def records(student_id):
        """Exam records of one student, ordered by exam number"""
        try:
            found = record_finder.find(student_id)
        except SheetFetchError as e:
            logger.error(f"Records fetch error: {str(e)}")
            return jsonify({
                'success': False,
                'message': 'Server error while fetching records'
            }), 500

        return jsonify({
            'success': True,
            'records': [record.to_dict() for record in found]
        })

    @app.route('/api/status')
    def status():
        return jsonify(gate.status_payload())

    @app.route('/admin')
    def admin():
        """System control panel"""
        now = gate.clock()
        hour = now.hour
        current = gate.current_status(hour)

        if current == STATUS_MAINTENANCE:
            status_class, status_text = 'maintenance', 'MAINTENANCE MODE'
        elif current == STATUS_OUTSIDE_HOURS:
            status_class = 'outside-hours'
            status_text = f'OUTSIDE ACTIVE HOURS (Current: {hour}:00)'
        else:
            status_class, status_text = 'active', 'SYSTEM ACTIVE'

        return render_template('admin.html',
                               settings=settings,
                               status_class=status_class,
                               status_text=status_text,
                               current_time=now.strftime('%Y-%m-%d %H:%M:%S'),
                               current_hour=hour,
                               within_hours=gate.is_within_active_hours(hour))

    @app.route('/')
    def index():
        return app.send_static_file('index.html')

    @app.errorhandler(404)
    def not_found(e):
        if request.path.startswith('/api/'):
            return jsonify({'success': False, 'message': 'Not found'}), 404
        return e

    @app.errorhandler(Exception)
    def unexpected_error(e):
        if isinstance(e, HTTPException):
            return e
        logger.exception(f"Unhandled error on {request.path}")
        return jsonify({'success': False, 'message': 'Internal server error'}), 500

    logger.info(
        f"Portal configured: maintenance={settings.maintenance_mode}, "
        f"active hours {settings.active_hours_label}"
    )
    return app


app = create_app()

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=app.config['SETTINGS'].port)
