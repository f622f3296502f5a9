import os
import io
from dotenv import load_dotenv
from flask import Flask, render_template, request, redirect, url_for, flash, jsonify, send_file, abort, g
from user import validate_user_form
from user_store import UserStore
from reports import create_users_pdf


def create_app(store=None, config=None):
    """Build the Flask application around ``store`` (a fresh UserStore by default)."""
    load_dotenv()

    app = Flask(__name__)

    # Configuration
    app.secret_key = os.getenv("SECRET_KEY") or 'change-this-in-production'
    app.config['USERS_REPORT_TITLE'] = os.getenv("USERS_REPORT_TITLE") or 'Users Report'
    if config:
        app.config.update(config)

    # The store lives as long as the application does
    app.extensions['user_store'] = store if store is not None else UserStore()

    @app.before_request
    def setup_user_store():
        """Expose the application's UserStore on the g variable."""
        if 'user_store' not in g:
            g.user_store = app.extensions['user_store']

    @app.errorhandler(404)
    def not_found(error):
        if request.path.startswith('/api/'):
            return jsonify({'error': 'Not found'}), 404
        return render_template('not_found.html'), 404

    def get_user_or_404(user_id):
        user = g.user_store.get(user_id)
        if user is None:
            app.logger.info(f"User ID {user_id} not found")
            abort(404)
        return user

    # Routes
    @app.route('/')
    def index():
        return redirect(url_for('users_index'))

    @app.route('/users')
    def users_index():
        return render_template('index.html', users=g.user_store.all(), search_string='')

    @app.route('/users/search')
    def users_search():
        search_string = request.args.get('q', '')
        users = g.user_store.search(search_string)
        app.logger.info(f"Search {search_string!r} matched {len(users)} users")
        return render_template('index.html', users=users, search_string=search_string)

    @app.route('/users/<int:user_id>')
    def user_details(user_id):
        user = get_user_or_404(user_id)
        return render_template('details.html', user=user)

    @app.route('/users/create', methods=['GET', 'POST'])
    def create_user():
        if request.method == 'POST':
            form = validate_user_form(request.form)
            if not form.is_valid:
                flash('Please correct the errors below', 'error')
                return render_template('create.html', user=form.user, errors=form.errors)

            user = g.user_store.create(form.user)
            app.logger.info(f"Created user ID: {user.id}")
            flash('User created successfully!', 'success')
            return redirect(url_for('users_index'))

        return render_template('create.html', user=None, errors={})

    @app.route('/users/edit/<int:user_id>', methods=['GET', 'POST'])
    def edit_user(user_id):
        user = get_user_or_404(user_id)

        if request.method == 'POST':
            form = validate_user_form(request.form)
            if not form.is_valid:
                form.user.id = user_id
                flash('Please correct the errors below', 'error')
                return render_template('edit.html', user=form.user, errors=form.errors)

            g.user_store.update(user_id, form.user)
            app.logger.info(f"Updated user ID: {user_id}")
            flash('User updated successfully!', 'success')
            return redirect(url_for('users_index'))

        return render_template('edit.html', user=user, errors={})

    @app.route('/users/delete/<int:user_id>', methods=['GET', 'POST'])
    def delete_user(user_id):
        if request.method == 'POST':
            if g.user_store.delete(user_id):
                app.logger.info(f"Deleted user ID: {user_id}")
                flash('User deleted successfully!', 'success')
            else:
                app.logger.info(f"Delete skipped, user ID {user_id} does not exist")
            return redirect(url_for('users_index'))

        user = get_user_or_404(user_id)
        return render_template('delete.html', user=user)

    @app.route('/users/export')
    def export_users_pdf():
        """Export the user listing (optionally filtered by q) to PDF."""
        users = g.user_store.search(request.args.get('q', ''))
        pdf_bytes = create_users_pdf(users, title=app.config['USERS_REPORT_TITLE'])
        return send_file(io.BytesIO(pdf_bytes),
                         mimetype='application/pdf',
                         as_attachment=True,
                         download_name='users_report.pdf')

    @app.route('/api/users')
    def api_users():
        users = g.user_store.search(request.args.get('q', ''))
        return jsonify([u.to_dict() for u in users])

    @app.route('/api/users/<int:user_id>')
    def api_user(user_id):
        user = g.user_store.get(user_id)
        if user is None:
            return jsonify({'error': 'User not found'}), 404
        return jsonify(user.to_dict())

    return app


app = create_app()

if __name__ == '__main__':
    app.run(debug=True)
