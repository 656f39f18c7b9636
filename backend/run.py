from trivia import create_app, socketio

app = create_app()
 
if __name__ == '__main__':
    app.logger.setLevel('INFO')
    app.logger.info(f"Host: http://localhost:{app.config['PORT']}  (run `flask --app run join-url` for player links)")
    # Use SocketIO server to enable websockets in dev
    socketio.run(app, host=app.config['HOST'], port=app.config['PORT'], allow_unsafe_werkzeug=True)
