from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.AutoField(primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=100)),
                ("price", models.DecimalField(decimal_places=2, max_digits=18)),
                (
                    "description",
                    models.TextField(blank=True, default=None, null=True),
                ),
            ],
            options={
                "db_table": "products",
                "ordering": ["id"],
            },
        ),
    ]
