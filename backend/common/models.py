from django.db import models

# Largest value a BigAutoField primary key can hold
MAX_ID = 2 ** 63 - 1


class OrganisationScopedQuerySet(models.QuerySet):
    def for_organisation(self, organisation_id):
        """Rows owned by one organisation. Every tenant read starts here."""
        if organisation_id is None:
            raise ValueError("organisation_id is required")
        return self.filter(organisation_id=organisation_id)


class OrganisationScopedManager(models.Manager.from_queryset(OrganisationScopedQuerySet)):
    pass


class BaseModel(models.Model):
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class OrganisationScopedModel(BaseModel):
    """
    Base for every record owned by a tenant.
    The organisation is always set server-side from the caller's token.
    """
    organisation = models.ForeignKey("platformapp.Organisation", on_delete=models.CASCADE, related_name="+")

    objects = OrganisationScopedManager()

    class Meta:
        abstract = True
