from django.db import models


class Customer(models.Model):
    name = models.CharField(max_length=255)
    mobile = models.CharField(max_length=32)
    email = models.EmailField(blank=True, null=True)
    address = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']
        indexes = [
            models.Index(fields=['mobile'], name='idx_customer_mobile'),
        ]

    def __str__(self):
        return self.name
