"""
Tests for the points, activities, rewards and reviews API endpoints.
"""
from visitrewards.extensions import db
from visitrewards.models import Activity, Reward
from visitrewards.services.points_service import points_service


def _fund(user, points):
    points_service.process_points_transaction(user.id, points, 'earn', 'seed')
    db.session.commit()


class TestPointsEndpoints:

    def test_balance(self, client, auth_headers, sample_user):
        _fund(sample_user, 40)

        response = client.get('/api/points/balance', headers=auth_headers)

        assert response.status_code == 200
        assert response.get_json()['points_balance'] == 40

    def test_history(self, client, auth_headers, sample_user):
        _fund(sample_user, 10)
        _fund(sample_user, 20)

        data = client.get('/api/points/history?per_page=1', headers=auth_headers).get_json()

        assert len(data['transactions']) == 1
        assert data['pagination']['total'] == 2

    def test_member_cannot_read_other_balance(self, client, auth_headers, admin_user):
        response = client.get(f'/api/points/balance?user_id={admin_user.id}', headers=auth_headers)
        assert response.status_code == 403

    def test_admin_reads_member_balance(self, client, admin_headers, sample_user):
        _fund(sample_user, 15)

        response = client.get(f'/api/points/balance?user_id={sample_user.id}', headers=admin_headers)

        assert response.get_json()['points_balance'] == 15

    def test_admin_unknown_user(self, client, admin_headers):
        response = client.get('/api/points/balance?user_id=9999', headers=admin_headers)

        assert response.status_code == 404
        assert response.get_json()['error']['code'] == 'USER_NOT_FOUND'


class TestActivityEndpoints:

    def test_list(self, client, auth_headers, sample_activity, inactive_activity):
        data = client.get('/api/activities?include_inactive=true', headers=auth_headers).get_json()
        # include_inactive is ignored for members
        assert [a['name'] for a in data['activities']] == ['gym']

    def test_admin_list_inactive(self, client, admin_headers, sample_activity, inactive_activity):
        data = client.get('/api/activities?include_inactive=true', headers=admin_headers).get_json()
        assert data['count'] == 2

    def test_create(self, client, admin_headers):
        response = client.post('/api/activities', headers=admin_headers,
                               json={'name': 'sauna', 'points': 5})

        assert response.status_code == 201
        assert response.get_json()['activity']['points'] == 5

    def test_create_duplicate(self, client, admin_headers, sample_activity):
        response = client.post('/api/activities', headers=admin_headers,
                               json={'name': 'gym', 'points': 5})
        assert response.status_code == 409

    def test_create_zero_points_rejected(self, client, admin_headers):
        response = client.post('/api/activities', headers=admin_headers,
                               json={'name': 'checkin', 'points': 0})

        assert response.status_code == 400
        assert response.get_json()['error']['code'] == 'INVALID_POINTS'

    def test_create_requires_admin(self, client, auth_headers):
        response = client.post('/api/activities', headers=auth_headers,
                               json={'name': 'sauna', 'points': 5})
        assert response.status_code == 403

    def test_toggle(self, client, admin_headers, sample_activity, sample_qr_code):
        response = client.post(f'/api/activities/{sample_activity.id}/toggle',
                               headers=admin_headers, json={'is_active': False})
        assert response.get_json()['activity']['is_active'] is False

        scan = client.post('/api/visits/accept', headers=admin_headers,
                           json={'code': 'valid-code-123', 'activity_name': 'gym'})
        assert scan.get_json()['error']['code'] == 'INVALID_ACTIVITY'

    def test_toggle_rejects_string_flag(self, client, admin_headers, sample_activity):
        response = client.post(f'/api/activities/{sample_activity.id}/toggle',
                               headers=admin_headers, json={'is_active': 'false'})

        assert response.status_code == 400
        assert response.get_json()['error']['code'] == 'VALIDATION_ERROR'
        assert db.session.get(Activity, sample_activity.id).is_active is True

    def test_update_points(self, client, admin_headers, sample_activity):
        response = client.patch(f'/api/activities/{sample_activity.id}',
                                headers=admin_headers, json={'points': 25})
        assert response.get_json()['activity']['points'] == 25


class TestRewardEndpoints:

    def test_create_and_list(self, client, admin_headers, auth_headers):
        created = client.post('/api/rewards', headers=admin_headers,
                              json={'name': 'Free coffee', 'points_cost': 30})
        assert created.status_code == 201

        data = client.get('/api/rewards', headers=auth_headers).get_json()
        assert [r['name'] for r in data['rewards']] == ['Free coffee']

    def test_toggle_rejects_string_flag(self, client, admin_headers):
        reward = Reward(name='Free coffee', points_cost=30)
        db.session.add(reward)
        db.session.commit()

        response = client.post(f'/api/rewards/{reward.id}/toggle',
                               headers=admin_headers, json={'is_active': 'false'})

        assert response.status_code == 400
        assert db.session.get(Reward, reward.id).is_active is True

    def test_redeem(self, client, auth_headers, sample_user):
        _fund(sample_user, 50)
        reward = Reward(name='Free coffee', points_cost=30)
        db.session.add(reward)
        db.session.commit()

        response = client.post(f'/api/rewards/{reward.id}/redeem', headers=auth_headers)

        assert response.status_code == 201
        assert response.get_json()['points_balance'] == 20

        history = client.get('/api/rewards/redemptions', headers=auth_headers).get_json()
        assert history['count'] == 1

    def test_redeem_insufficient(self, client, auth_headers, sample_user):
        reward = Reward(name='Free coffee', points_cost=30)
        db.session.add(reward)
        db.session.commit()

        response = client.post(f'/api/rewards/{reward.id}/redeem', headers=auth_headers)

        assert response.status_code == 400
        assert response.get_json()['error']['code'] == 'INSUFFICIENT_POINTS'

    def test_redeem_missing_reward(self, client, auth_headers):
        response = client.post('/api/rewards/999/redeem', headers=auth_headers)
        assert response.status_code == 404


class TestReviewEndpoints:

    def test_submit_after_visit(self, client, auth_headers, admin_headers, sample_activity, sample_qr_code):
        before = client.get('/api/reviews/eligibility', headers=auth_headers).get_json()
        assert before['eligible'] is False

        client.post('/api/visits/accept', headers=admin_headers,
                    json={'code': 'valid-code-123', 'activity_name': 'gym'})

        response = client.post('/api/reviews', headers=auth_headers, json={'mood': 4, 'comment': 'Nice'})
        assert response.status_code == 201

        again = client.post('/api/reviews', headers=auth_headers, json={'mood': 5})
        assert again.status_code == 409
        assert again.get_json()['error']['code'] == 'REVIEW_NOT_ALLOWED'

    def test_missing_mood(self, client, auth_headers):
        response = client.post('/api/reviews', headers=auth_headers, json={})
        assert response.status_code == 400

    def test_invalid_mood(self, client, auth_headers, sample_user):
        _fund(sample_user, 10)
        response = client.post('/api/reviews', headers=auth_headers, json={'mood': 9})

        assert response.status_code == 400
        assert response.get_json()['error']['code'] == 'INVALID_MOOD'

    def test_stats_admin_only(self, client, auth_headers, admin_headers):
        assert client.get('/api/reviews/stats', headers=auth_headers).status_code == 403

        data = client.get('/api/reviews/stats', headers=admin_headers).get_json()
        assert data['total_reviews'] == 0
        assert data['mood_distribution'] == {'1': 0, '2': 0, '3': 0, '4': 0, '5': 0}
