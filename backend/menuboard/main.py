from flask import Blueprint, render_template

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return render_template('index.html')


@main.route('/session/<string:session>')
def session_page(session):
    return render_template('page.html', session=session)
