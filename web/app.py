"""Simple Flask web interface for iconpack-reconciler.

Thin HTTP adapter over the library: uploads are parsed in memory and
results are returned as JSON. Callers are expected to handle
authentication in front of it.
"""

from flask import Flask, jsonify, request

from iconpack_reconciler.config import Settings
from iconpack_reconciler.domain.enums import MergeMode, ResourceType
from iconpack_reconciler.domain.models import MergeRequest
from iconpack_reconciler.errors import ResourceError, ResourceIOError
from iconpack_reconciler.operations.diff import diff_appfilters
from iconpack_reconciler.operations.merge import merge_appfilters_in_memory
from iconpack_reconciler.operations.missing_icons import find_missing_icons
from iconpack_reconciler.reader import read_resource_file

app = Flask(__name__)

# Configuration
settings = Settings.from_env()

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}


@app.errorhandler(ResourceError)
def handle_resource_error(e: ResourceError):
    app.logger.warning("Request failed: %s", e)
    return jsonify({'error': str(e)}), 400


@app.errorhandler(ResourceIOError)
def handle_resource_io_error(e: ResourceIOError):
    # Server-side files or directories that cannot be read or written.
    app.logger.error("I/O failure: %s", e)
    return jsonify({'error': str(e)}), 500


def _read_upload(field: str) -> bytes | None:
    upload = request.files.get(field)
    if upload is None or not upload.filename:
        return None
    return upload.read()


@app.route('/api/reader/readfile', methods=['POST'])
def read_file():
    """Parse one uploaded appfilter or icon-pack file."""
    content = _read_upload('file')
    if content is None:
        return jsonify({'error': 'No file provided'}), 400

    raw_type = request.form.get('type') or ResourceType.APPFILTER.value
    try:
        resource_type = ResourceType(raw_type)
    except ValueError:
        return jsonify({'error': f'Unsupported type: {raw_type}'}), 400

    return jsonify(read_resource_file(content, resource_type))


@app.route('/api/processor/diffappfilters', methods=['POST'])
def diff_app_filters():
    """Compare two uploaded appfilter files."""
    first = _read_upload('file1')
    if first is None:
        return jsonify({'error': 'missing file1 field'}), 400
    second = _read_upload('file2')
    if second is None:
        return jsonify({'error': 'missing file2 field'}), 400

    return jsonify(diff_appfilters(first, second).to_dict())


@app.route('/api/processor/difficons', methods=['POST'])
def diff_icons():
    """Compare a server-side icon directory with a server-side appfilter."""
    icon_dir = request.form.get('icon_dir', '')
    if not icon_dir:
        return jsonify({'error': 'missing icon_dir field'}), 400
    appfilter = request.form.get('appfilter', '')
    if not appfilter:
        return jsonify({'error': 'missing appfilter field'}), 400

    missing = find_missing_icons(icon_dir, appfilter)
    return jsonify({'missing_icons': missing, 'count': len(missing)})


@app.route('/api/processor/mergeappfilters', methods=['POST'])
def merge_app_filters():
    """Merge two uploaded appfilter files and return the merged document."""
    first = _read_upload('file1')
    if first is None:
        return jsonify({'error': 'missing file1'}), 400
    second = _read_upload('file2')
    if second is None:
        return jsonify({'error': 'missing file2'}), 400

    # No components selected means merge everything.
    components = [c for c in request.form.getlist('components') if c]
    merge_request = MergeRequest(
        first_file=first,
        second_file=second,
        mode=MergeMode.SELECTED if components else MergeMode.ALL,
        selected_components=components,
        merge_into_first=request.form.get('merge_into_first', '').lower() in _TRUE_VALUES,
    )

    result, content = merge_appfilters_in_memory(merge_request, indent=settings.merge_indent)
    app.logger.info("Merged %d items (%d duplicates)", result.items_merged, len(result.failed_items))
    return jsonify({
        'result': result.to_dict(),
        'content': content.decode('utf-8'),
    })


if __name__ == '__main__':
    app.run(debug=True, port=5002)
