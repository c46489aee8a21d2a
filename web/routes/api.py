"""API routes - JSON endpoints for the drill press frontend."""
from flask import Blueprint, current_app, request, send_file
import io

from drillpress.program_assembler import NoHolesError
from web.services.settings_service import SettingsService
from web.services.toolpath_service import ToolpathService, PayloadError
from web.utils.responses import success_response, error_response, validation_response

api_bp = Blueprint('api', __name__)


def _load_job():
    """Parse the request body into (holes, config)."""
    data = request.get_json(silent=True)
    if data is None:
        raise PayloadError('No data provided')
    return ToolpathService.parse_job(data)


def _build_program():
    """Parse, validate and generate. Returns (holes, program) or an error response."""
    try:
        holes, config = _load_job()
    except PayloadError as e:
        return None, error_response(str(e))

    if holes:
        errors = ToolpathService.validate(holes, config)
        if errors:
            return None, error_response('Configuration errors: ' + ', '.join(errors), errors=errors)

    try:
        program = ToolpathService.generate(holes, config)
    except NoHolesError as e:
        return None, error_response(str(e))
    except Exception as e:
        current_app.logger.exception('Program generation failed')
        return None, error_response(str(e), status_code=500)
    return (holes, program), None


@api_bp.route('/settings')
def get_settings():
    """Get drilling defaults and machine envelope."""
    return success_response(data=SettingsService.get_settings_dict())


@api_bp.route('/validate', methods=['POST'])
def validate_job():
    """Validate a drilling job before generating a program."""
    try:
        holes, config = _load_job()
    except PayloadError as e:
        return error_response(str(e))

    errors = ToolpathService.validate(holes, config)
    warnings = ToolpathService.get_validation_warnings(config)
    return validation_response(errors, warnings)


@api_bp.route('/generate', methods=['POST'])
def generate_program():
    """Generate the OpenSBP program for preview."""
    result, error = _build_program()
    if error:
        return error

    holes, program = result
    current_app.logger.info('Generated program for %d hole(s)', len(holes))
    return success_response(data={'program': program, 'hole_count': len(holes)})


@api_bp.route('/download', methods=['POST'])
def download_program():
    """Download the generated program as an .sbp file."""
    result, error = _build_program()
    if error:
        return error

    holes, program = result
    buffer = io.BytesIO(program.encode('utf-8'))
    buffer.seek(0)

    return send_file(
        buffer,
        mimetype='text/plain',
        as_attachment=True,
        download_name=ToolpathService.download_filename(holes)
    )


@api_bp.route('/optimize', methods=['POST'])
def optimize_holes():
    """Return holes in drilling order for toolpath preview."""
    try:
        holes, _ = _load_job()
    except PayloadError as e:
        return error_response(str(e))

    return success_response(data=ToolpathService.optimize(holes))


@api_bp.route('/patterns', methods=['POST'])
def expand_patterns():
    """Expand array and circle pattern operations into holes."""
    data = request.get_json(silent=True)
    if not data:
        return error_response('No data provided')

    try:
        config = ToolpathService.parse_config(data.get('config'))
        holes = ToolpathService.expand_patterns(data.get('operations'), config)
    except PayloadError as e:
        return error_response(str(e))

    return success_response(
        data={'holes': [hole.to_dict() for hole in holes]},
        message=f'Generated {len(holes)} hole(s)'
    )
