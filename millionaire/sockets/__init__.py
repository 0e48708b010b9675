from .game_events import register_game_events

def register_sockets(socketio):
    register_game_events(socketio)
