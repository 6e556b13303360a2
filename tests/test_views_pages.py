from django.urls import reverse


def test_home_lists_services_and_share_link(client):
    response = client.get(reverse('pages:home'))

    assert response.status_code == 200
    assert len(response.context['services']) == 6
    assert response.context['share_url'] == 'http://testserver/'
    assert b'Deep Cleaning' in response.content


def test_services_page_links_each_service_to_booking_form(client):
    response = client.get(reverse('services:index'))

    assert response.status_code == 200
    assert b'/bookings/?service=window-cleaning' in response.content
    assert b'Contact for Quote' in response.content
    assert b'$150' in response.content


def test_about_page_shows_founder(client):
    response = client.get(reverse('pages:about'))

    assert response.status_code == 200
    assert b'Tania Intriago' in response.content


def test_contact_page_shows_business_phone(client, settings):
    settings.BUSINESS_PHONE = '+15550001111'

    response = client.get(reverse('pages:contact'))

    assert response.status_code == 200
    assert b'tel:+15550001111' in response.content


def test_unknown_page_renders_404_template(client):
    response = client.get('/no-such-page/')

    assert response.status_code == 404
    assert b"We couldn't find the page you were looking for." in response.content


def test_public_pages_do_not_touch_remote_store(client, remote):
    for name in ('pages:home', 'pages:about', 'pages:contact', 'services:index'):
        client.get(reverse(name))
    assert remote.requests == []


def test_nav_shows_admin_login_for_anonymous_visitor(client):
    response = client.get(reverse('pages:home'))

    assert response.context['is_admin'] is False
