def events_named(sio_client, name):
    return [pkt for pkt in sio_client.get_received() if pkt['name'] == name]


def test_subscribe_to_room_receives_state(client, sio_client):
    host = client.post('/api/multiplayer/room/create', json={'player_name': 'Alice'}).get_json()

    sio_client.emit('join_room_channel', {'room_id': host['room_id']})
    updates = events_named(sio_client, 'game_state_update')
    assert updates
    state = updates[-1]['args'][0]['state']
    assert state['room_id'] == host['room_id']
    assert state['status'] == 'waiting'


def test_subscribe_to_unknown_room(sio_client):
    sio_client.emit('join_room_channel', {'room_id': 'missing'})
    errors = events_named(sio_client, 'error')
    assert errors[-1]['args'][0]['error'] == 'Room not found'

    sio_client.emit('join_room_channel', {})
    assert events_named(sio_client, 'error')[-1]['args'][0]['error'] == 'Room ID is required'


def test_join_and_guess_are_broadcast(client, sio_client):
    host = client.post('/api/multiplayer/room/create', json={'player_name': 'Alice'}).get_json()
    sio_client.emit('join_room_channel', {'room_id': host['room_id']})
    sio_client.get_received()

    client.post('/api/multiplayer/room/join', json={'player_name': 'Bob', 'room_code': host['room_code']})
    updates = events_named(sio_client, 'game_state_update')
    assert updates[-1]['args'][0]['state']['status'] == 'playing'

    client.post(
        f"/api/multiplayer/game/{host['room_id']}/guess",
        json={'player_id': host['player_id'], 'guess': 'CRANE'}
    )
    updates = events_named(sio_client, 'game_state_update')
    players = updates[-1]['args'][0]['state']['players']
    assert players[0]['status'] == 'won'


def test_closing_waiting_room_is_broadcast(client, sio_client):
    host = client.post('/api/multiplayer/room/create', json={'player_name': 'Alice'}).get_json()
    sio_client.emit('join_room_channel', {'room_id': host['room_id']})
    sio_client.get_received()

    client.delete(f"/api/multiplayer/room/{host['room_id']}/leave", json={'player_id': host['player_id']})
    closed = events_named(sio_client, 'room_closed')
    assert closed[-1]['args'][0] == {'room_id': host['room_id']}


def test_unsubscribed_client_gets_no_updates(client, sio_client):
    host = client.post('/api/multiplayer/room/create', json={'player_name': 'Alice'}).get_json()
    sio_client.emit('join_room_channel', {'room_id': host['room_id']})
    sio_client.emit('leave_room_channel', {'room_id': host['room_id']})
    sio_client.get_received()

    client.post('/api/multiplayer/room/join', json={'player_name': 'Bob', 'room_code': host['room_code']})
    assert events_named(sio_client, 'game_state_update') == []
