import logging

from django.conf import settings
from django.db import models
from django.utils import timezone

logger = logging.getLogger(__name__)


class Post(models.Model):
    author = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE)
    title = models.CharField(max_length=200)
    text = models.TextField()
    created_date = models.DateTimeField(default=timezone.now)
    published_date = models.DateTimeField(blank=True, null=True)

    def publish(self):
        """Stamp the post with the current time and save it."""
        self.published_date = timezone.now()
        self.save()
        logger.info("Published post %s at %s", self.pk, self.published_date)

    def __str__(self):
        return self.title
