"""Flask web application for the Nimbus Flux dashboard."""

import os
import uuid
from threading import Lock

from flask import Flask, render_template, request, jsonify, session

from nimbus.flows import FlowBusyError, FlowStatus, Shell
from nimbus.services import CRMService, DashboardService
from config import PORT, SECRET_KEY

app = Flask(__name__)
app.config['SECRET_KEY'] = SECRET_KEY

# One shell per browser session, in memory only
workspaces = {}
_workspaces_lock = Lock()

dashboard_service = DashboardService()
crm_service = CRMService()


def get_shell() -> Shell:
    """Return the shell for the current session, creating it on first use."""
    workspace_id = session.get('workspace_id')
    if not workspace_id:
        workspace_id = str(uuid.uuid4())
        session['workspace_id'] = workspace_id
    with _workspaces_lock:
        shell = workspaces.get(workspace_id)
        if shell is None:
            shell = workspaces[workspace_id] = Shell()
    return shell


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _non_string_key(data: dict, *keys: str):
    """First key whose value is present but not a string (null counts as absent)."""
    for key in keys:
        if data.get(key) is not None and not isinstance(data[key], str):
            return key
    return None


@app.route('/')
def index():
    """Render the main page."""
    return render_template('index.html')


@app.route('/api/state')
def api_state():
    """Current view and selected profile."""
    return jsonify(get_shell().to_dict())


@app.route('/api/view', methods=['POST'])
def api_view():
    """Switch the active screen."""
    shell = get_shell()
    view = _json_body().get('view', '')
    try:
        shell.navigate(view)
    except ValueError:
        return jsonify({'error': f'Unknown view: {view}'}), 400
    return jsonify(shell.to_dict())


@app.route('/api/icp/generate', methods=['POST'])
def api_generate_icp():
    """Generate an Ideal Customer Profile from a vertical description."""
    flow = get_shell().generator
    data = _json_body()
    if _non_string_key(data, 'description'):
        return jsonify({'error': "'description' must be a string"}), 400
    description = (data.get('description') or '').strip()

    if not description:
        return jsonify({'error': 'Description is required'}), 400

    try:
        status = flow.submit(description)
    except FlowBusyError as e:
        return jsonify({'error': str(e)}), 409

    if status is FlowStatus.FAILED:
        return jsonify({'error': flow.notice, 'status': status.value}), 500

    return jsonify({
        'success': True,
        'status': status.value,
        'profile': flow.result.to_dict(),
    })


@app.route('/api/icp/select', methods=['POST'])
def api_select_icp():
    """Use the generated profile as context for the creative loop."""
    shell = get_shell()
    profile = shell.generator.select()
    if profile is None:
        return jsonify({'error': 'No generated profile to select'}), 400

    return jsonify({
        'success': True,
        'profile': profile.to_dict(),
        'view': shell.view.value,
    })


@app.route('/api/creative')
def api_creative_state():
    """Creative loop state."""
    return jsonify(get_shell().creative.to_dict())


@app.route('/api/creative/content', methods=['POST'])
def api_creative_content():
    """Update the content and/or asset type."""
    flow = get_shell().creative
    data = _json_body()
    if _non_string_key(data, 'content'):
        return jsonify({'error': "'content' must be a string"}), 400

    if 'assetType' in data:
        try:
            flow.set_asset_type(data['assetType'])
        except ValueError:
            return jsonify({'error': f"Unknown asset type: {data['assetType']}"}), 400
    if 'content' in data:
        flow.set_content(data['content'] or '')

    return jsonify(flow.to_dict())


@app.route('/api/creative/profile', methods=['POST'])
def api_creative_profile():
    """Edit the working profile's text fields."""
    flow = get_shell().creative
    data = _json_body()
    bad_key = _non_string_key(data, 'role', 'companySize')
    if bad_key:
        return jsonify({'error': f"'{bad_key}' must be a string"}), 400
    flow.update_profile(role=data.get('role'), company_size=data.get('companySize'))
    return jsonify(flow.to_dict())


@app.route('/api/creative/profile/<field>/items', methods=['POST'])
def api_add_profile_item(field):
    """Append an item to a working-profile list field."""
    flow = get_shell().creative
    data = _json_body()
    if _non_string_key(data, 'value'):
        return jsonify({'error': "'value' must be a string"}), 400
    try:
        flow.add_item(field, data.get('value') or '')
    except KeyError:
        return jsonify({'error': f'Unknown field: {field}'}), 404
    return jsonify(flow.to_dict())


@app.route('/api/creative/profile/<field>/items/<int:index>', methods=['DELETE'])
def api_remove_profile_item(field, index):
    """Remove an item from a working-profile list field."""
    flow = get_shell().creative
    try:
        flow.remove_item(field, index)
    except KeyError:
        return jsonify({'error': f'Unknown field: {field}'}), 404
    except IndexError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify(flow.to_dict())


@app.route('/api/creative/profile/<field>/reorder', methods=['POST'])
def api_reorder_profile_item(field):
    """Move an item within a working-profile list field."""
    flow = get_shell().creative
    data = _json_body()
    try:
        flow.reorder_item(field, int(data.get('from')), int(data.get('to')))
    except KeyError:
        return jsonify({'error': f'Unknown field: {field}'}), 404
    except (TypeError, ValueError):
        return jsonify({'error': "'from' and 'to' must be integers"}), 400
    except IndexError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify(flow.to_dict())


@app.route('/api/creative/analyze', methods=['POST'])
def api_creative_analyze():
    """Request feedback for the current creative content."""
    flow = get_shell().creative
    data = _json_body()
    if _non_string_key(data, 'content'):
        return jsonify({'error': "'content' must be a string"}), 400

    if 'assetType' in data:
        try:
            flow.set_asset_type(data['assetType'])
        except ValueError:
            return jsonify({'error': f"Unknown asset type: {data['assetType']}"}), 400
    if 'content' in data:
        flow.set_content(data['content'] or '')

    if not flow.content.strip():
        return jsonify({'error': 'Content is required'}), 400

    try:
        status = flow.analyze()
    except FlowBusyError as e:
        return jsonify({'error': str(e)}), 409

    if status is FlowStatus.FAILED:
        return jsonify({'error': flow.notice, 'status': status.value}), 500

    return jsonify(flow.to_dict())


@app.route('/api/creative/apply-revision', methods=['POST'])
def api_apply_revision():
    """Replace the content with the suggested rewrite."""
    flow = get_shell().creative
    if not flow.apply_revision():
        return jsonify({'error': 'No revision to apply'}), 400
    return jsonify(flow.to_dict())


@app.route('/api/dashboard')
def api_dashboard():
    """Static pipeline telemetry."""
    return jsonify(dashboard_service.summary())


@app.route('/api/leads')
def api_leads():
    """Lead board grouped by status."""
    return jsonify({'columns': crm_service.board(request.args.get('q'))})


if __name__ == '__main__':
    # Make sure an API key is set
    if not os.environ.get('GEMINI_API_KEY') and not os.environ.get('GOOGLE_API_KEY') \
            and not os.environ.get('OPENAI_API_KEY'):
        print("Warning: GEMINI_API_KEY, GOOGLE_API_KEY or OPENAI_API_KEY environment variable not set")

    app.run(debug=False, host='0.0.0.0', port=PORT)
