"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data

This creates:
- 4 users (admin, alice, bob, charlie)
- Categories with a nested subcategory
- Subscription plans
- 6 product listings
- Rentals, a conversation and reviews between alice and bob
"""

from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.messaging.models import Conversation
from apps.messaging.services import create_conversation
from apps.notifications.models import Notification
from apps.payments.models import PaymentIntent, PaymentMethod
from apps.products.models import Category, Product, Tag
from apps.products.services import create_product
from apps.rentals.models import Rental, RentalStatus
from apps.rentals.services import create_rental, update_rental
from apps.reviews.models import ProductReview, UserReview
from apps.reviews.services import create_product_review, create_user_review
from apps.subscriptions.models import Subscription, SubscriptionPlan


class Command(BaseCommand):
    help = 'Create sample data for trying out the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        categories = self.create_categories()
        self.create_plans()
        products = self.create_products(users, categories)
        self.create_activity(users, products)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@example.com / admin123 (staff)')
        self.stdout.write('  alice@example.com / password123 (owner)')
        self.stdout.write('  bob@example.com / password123 (renter)')
        self.stdout.write('  charlie@example.com / password123')

    def clear_data(self):
        """Clear all marketplace data from the database."""
        Notification.objects.all().delete()
        UserReview.objects.all().delete()
        ProductReview.objects.all().delete()
        Conversation.objects.all().delete()
        PaymentIntent.objects.all().delete()
        PaymentMethod.objects.all().delete()
        Rental.objects.all().delete()
        Product.objects.all().delete()
        Tag.objects.all().delete()
        Category.objects.filter(parent_category__isnull=False).delete()
        Category.objects.all().delete()
        Subscription.objects.all().delete()
        SubscriptionPlan.objects.all().delete()
        User.objects.filter(is_superuser=False).delete()
        User.objects.filter(email='admin@example.com').delete()

    def create_users(self):
        self.stdout.write('  Creating users...')

        admin, _ = User.objects.get_or_create(
            email='admin@example.com',
            defaults={
                'first_name': 'Admin',
                'is_staff': True,
                'is_superuser': True,
            }
        )
        admin.set_password('admin123')
        admin.save()

        users = {'admin': admin}
        for key, first_name, last_name in [
            ('alice', 'Alice', 'Lender'),
            ('bob', 'Bob', 'Borrower'),
            ('charlie', 'Charlie', 'Browser'),
        ]:
            user, _ = User.objects.get_or_create(
                email=f'{key}@example.com',
                defaults={'first_name': first_name, 'last_name': last_name}
            )
            user.set_password('password123')
            user.save()
            users[key] = user

        return users

    def create_categories(self):
        self.stdout.write('  Creating categories...')

        categories = {}
        for name, description in [
            ('Tools', 'Power tools and hand tools'),
            ('Outdoors', 'Camping, hiking and water sports'),
            ('Electronics', 'Cameras, drones and audio gear'),
        ]:
            categories[name], _ = Category.objects.get_or_create(
                name=name,
                defaults={'description': description}
            )

        categories['Cameras'], _ = Category.objects.get_or_create(
            name='Cameras',
            defaults={'parent_category': categories['Electronics']}
        )
        return categories

    def create_plans(self):
        self.stdout.write('  Creating subscription plans...')

        for name, price_cents, cycle, max_listings, max_rentals in [
            ('Basic', 0, 'monthly', 3, 2),
            ('Pro', 1999, 'monthly', 25, 20),
            ('Pro Yearly', 19900, 'yearly', 25, 20),
        ]:
            SubscriptionPlan.objects.get_or_create(
                name=name,
                defaults={
                    'price_cents': price_cents,
                    'billing_cycle': cycle,
                    'max_listings': max_listings,
                    'max_rentals_per_month': max_rentals,
                }
            )

    def create_products(self, users, categories):
        self.stdout.write('  Creating products...')

        products_data = [
            ('alice', 'Tools', 'Cordless Drill', '12.00', ['drill', 'cordless']),
            ('alice', 'Tools', 'Tile Cutter', '18.50', ['tiling']),
            ('alice', 'Outdoors', 'Four-person Tent', '25.00', ['camping', 'tent']),
            ('charlie', 'Outdoors', 'Sea Kayak', '40.00', ['kayak', 'water']),
            ('charlie', 'Cameras', 'Mirrorless Camera', '45.00', ['camera', 'video']),
            ('admin', 'Electronics', 'Portable Projector', '20.00', ['projector']),
        ]

        products = {}
        for owner_key, category_name, name, price, tags in products_data:
            products[name] = create_product(
                owner=users[owner_key],
                name=name,
                category_id=categories[category_name].id,
                daily_price=Decimal(price),
                deposit_amount=Decimal(price) * 5,
                tags=tags,
                address={'city': 'Prague', 'country': 'CZ'},
            )

        return products

    def create_activity(self, users, products):
        """Bob rents from Alice, they chat and review each other."""
        self.stdout.write('  Creating rentals, conversations and reviews...')

        alice, bob = users['alice'], users['bob']
        start = (timezone.now() - timedelta(days=10)).replace(hour=9, minute=0, second=0, microsecond=0)

        past = create_rental(
            renter=bob,
            product_id=products['Cordless Drill'].id,
            rental_period_start=start,
            rental_period_end=start + timedelta(days=2),
        )
        for status in [RentalStatus.CONFIRMED, RentalStatus.ACTIVE, RentalStatus.COMPLETED]:
            update_rental(user=alice, rental_id=past.id, status=status)

        create_rental(
            renter=bob,
            product_id=products['Four-person Tent'].id,
            rental_period_start=start + timedelta(days=20),
            rental_period_end=start + timedelta(days=23),
        )

        create_conversation(user=bob, rental_id=past.id, message='Hi! Does the drill come with bits?')

        create_product_review(
            reviewer=bob,
            product_id=products['Cordless Drill'].id,
            rental_id=past.id,
            rating=5,
            title='Worked great',
        )
        create_user_review(
            reviewer=bob,
            reviewed_user_id=alice.id,
            rental_id=past.id,
            review_type='owner',
            rating=5,
        )
        create_user_review(
            reviewer=alice,
            reviewed_user_id=bob.id,
            rental_id=past.id,
            review_type='renter',
            rating=4,
            content='Returned on time',
        )
