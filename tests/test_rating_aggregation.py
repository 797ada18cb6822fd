import pytest

from reviews.aggregation import recompute_product_rating
from reviews.models import Review
from reviews.services import ReviewService

pytestmark = pytest.mark.django_db


def _refresh(product):
    product.refresh_from_db()
    return product


def test_product_without_reviews_has_zero_rating(product):
    assert recompute_product_rating(product.pk) == 1
    product = _refresh(product)
    assert product.rating == 0
    assert product.review_count == 0


def test_mean_of_active_reviews(product, make_user):
    ReviewService.submit(make_user(), product.pk, 4, "Great")
    ReviewService.submit(make_user(), product.pk, 2, "Meh")

    product = _refresh(product)
    assert product.rating == pytest.approx(3.0)
    assert product.review_count == 2


def test_soft_delete_drops_review_from_aggregate(product, make_user):
    first, second = make_user(), make_user()
    ReviewService.submit(first, product.pk, 4, "Great")
    review, _ = ReviewService.submit(second, product.pk, 2, "Meh")

    ReviewService.soft_delete(second, review.pk)

    product = _refresh(product)
    assert product.rating == pytest.approx(4.0)
    assert product.review_count == 1


def test_editing_a_review_recomputes(product, user):
    ReviewService.submit(user, product.pk, 5, "Loved it")
    ReviewService.submit(user, product.pk, 1, "Broke after a week")

    product = _refresh(product)
    assert product.rating == pytest.approx(1.0)
    assert product.review_count == 1


def test_deleting_the_last_review_resets_to_zero(product, user):
    review, _ = ReviewService.submit(user, product.pk, 3, "Fine")
    ReviewService.soft_delete(user, review.pk)

    product = _refresh(product)
    assert product.rating == 0
    assert product.review_count == 0


def test_hidden_reviews_are_not_counted(product, make_user):
    ReviewService.submit(make_user(), product.pk, 5, "Great")
    hidden, _ = ReviewService.submit(make_user(), product.pk, 1, "Spam")

    hidden.status = Review.Status.HIDDEN
    hidden.save()

    product = _refresh(product)
    assert product.rating == pytest.approx(5.0)
    assert product.review_count == 1


def test_likes_do_not_change_the_aggregate(product, make_user):
    author, fan = make_user(), make_user()
    review, _ = ReviewService.submit(author, product.pk, 4, "Great")

    ReviewService.toggle_like(fan, review.pk)

    product = _refresh(product)
    assert product.rating == pytest.approx(4.0)
    assert product.review_count == 1


def test_aggregate_is_scoped_to_the_product(make_product, user):
    first, second = make_product(), make_product()
    ReviewService.submit(user, first.pk, 5, "Great")

    second = _refresh(second)
    assert second.rating == 0
    assert second.review_count == 0


def test_recompute_of_missing_product_is_a_no_op():
    assert recompute_product_rating(999999) == 0


def test_deleting_the_author_recomputes(product, make_user):
    stays, leaver = make_user(), make_user()
    ReviewService.submit(stays, product.pk, 4, "Great")
    ReviewService.submit(leaver, product.pk, 2, "Meh")

    leaver.delete()

    product = _refresh(product)
    assert product.rating == pytest.approx(4.0)
    assert product.review_count == 1
    assert Review.objects.filter(product=product).count() == 1


def test_hard_deleting_a_review_recomputes(product, make_user):
    ReviewService.submit(make_user(), product.pk, 4, "Great")
    review, _ = ReviewService.submit(make_user(), product.pk, 2, "Meh")

    review.delete()

    product = _refresh(product)
    assert product.rating == pytest.approx(4.0)
    assert product.review_count == 1


def test_product_delete_with_reviews_succeeds(product, make_user):
    ReviewService.submit(make_user(), product.pk, 5, "Great")

    product.delete()

    assert not Review.objects.exists()
