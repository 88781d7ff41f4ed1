import pytest

# Documentation
#
#   https://pytest-django.readthedocs.io/en/latest/tutorial.html
#
# To run the tests, from the repository root run:
#
#   python -m pytest
#
# To run a single test, e.g.,:
#   pytest blog-project/blog/tests.py::test_publish_sets_published_date

import datetime
import logging
from io import StringIO
from unittest import mock

from django.apps import apps
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.core.management import call_command
from django.db import connection
from django.utils import timezone

from blog.models import Post


@pytest.fixture
def author(db):
    return get_user_model().objects.create_user(username='ola', password='secret')


@pytest.fixture
def post(author):
    return Post.objects.create(author=author, title='Sample title', text='Test')


def test_blog_app_installed():
    config = apps.get_app_config('blog')
    assert config.verbose_name == 'Blog'
    assert config.get_model('Post') is Post


def test_new_post_is_unpublished(post):
    post.refresh_from_db()
    assert post.published_date is None
    assert post.created_date is not None
    assert post.created_date <= timezone.now()


def test_created_date_defaults_to_now(author):
    before = timezone.now()
    post = Post(author=author, title='Draft', text='')
    after = timezone.now()
    assert before <= post.created_date <= after


def test_publish_sets_published_date(post):
    before = timezone.now()
    post.publish()
    after = timezone.now()

    stored = Post.objects.get(pk=post.pk)
    assert stored.published_date is not None
    assert stored.published_date.tzinfo is not None
    assert before <= stored.published_date <= after
    assert stored.published_date == post.published_date


def test_publish_again_restamps(post):
    earlier = timezone.now() - datetime.timedelta(days=7)
    post.published_date = earlier
    post.save()
    post.publish()
    stored = Post.objects.get(pk=post.pk)
    assert stored.published_date > earlier
    assert stored.published_date == post.published_date
    assert Post.objects.filter(published_date__isnull=False).count() == 1


def test_publish_does_not_check_created_date(author):
    # published_date is not ordered against created_date
    future = timezone.now() + datetime.timedelta(days=1)
    post = Post.objects.create(author=author, title='Later', text='', created_date=future)
    post.publish()
    assert post.published_date < post.created_date


def test_publish_logs(post, caplog):
    caplog.set_level(logging.INFO, logger='blog')
    post.publish()
    assert "Published post %s" % post.pk in caplog.text


def test_str_is_title(post):
    assert str(post) == 'Sample title'


def test_title_max_length(author):
    post = Post(author=author, title='x' * 201, text='body')
    with pytest.raises(ValidationError) as excinfo:
        post.full_clean()
    assert 'title' in excinfo.value.message_dict
    post.title = 'x' * 200
    post.full_clean()


def test_text_is_required(author):
    post = Post(author=author, title='Empty', text='')
    with pytest.raises(ValidationError) as excinfo:
        post.full_clean()
    assert 'text' in excinfo.value.message_dict


def test_author_has_many_posts(author):
    Post.objects.create(author=author, title='One', text='1')
    Post.objects.create(author=author, title='Two', text='2')
    assert sorted(p.title for p in author.post_set.all()) == ['One', 'Two']


def test_deleting_author_deletes_posts(post, author):
    author.delete()
    assert not Post.objects.filter(pk=post.pk).exists()


def test_syncdb_runs_migrate_with_syncdb():
    with mock.patch('blog.management.commands.syncdb.call_command') as migrate:
        call_command('syncdb', '--noinput')
    migrate.assert_called_once()
    args, kwargs = migrate.call_args
    assert args == ('migrate',)
    assert kwargs['run_syncdb'] is True
    assert kwargs['database'] == 'default'
    assert kwargs['interactive'] is False


def test_syncdb_forwards_database():
    with mock.patch('blog.management.commands.syncdb.call_command') as migrate:
        call_command('syncdb', database='other')
    _, kwargs = migrate.call_args
    assert kwargs['database'] == 'other'
    assert kwargs['interactive'] is True


@pytest.mark.django_db(transaction=True)
def test_syncdb_creates_tables():
    call_command('migrate', 'blog', 'zero', interactive=False, stdout=StringIO())
    assert 'blog_post' not in connection.introspection.table_names()
    call_command('syncdb', '--noinput', stdout=StringIO())
    assert 'blog_post' in connection.introspection.table_names()


@pytest.mark.django_db
def test_migrations_match_models():
    # exits non-zero when a model change has no migration
    call_command('makemigrations', '--check', '--dry-run', stdout=StringIO())
