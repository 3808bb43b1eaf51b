from locust import HttpUser, task, between
import os
import random


class LabelDashboardUser(HttpUser):
    """Locust user that logs in with a Django session and reads the label dashboards."""

    wait_time = between(0.5, 2.5)

    def on_start(self):
        self.tenant_id = int(os.getenv("LOCUST_TENANT_ID", "1"))
        self.artist_ids = []
        self.work_ids = []

        username = os.getenv("LOCUST_USERNAME", "locust")
        password = os.getenv("LOCUST_PASSWORD", "testpass123")

        self.client.get("/api-auth/login/")
        csrftoken = self.client.cookies.get("csrftoken", "")
        with self.client.post(
            "/api-auth/login/",
            data={
                "username": username,
                "password": password,
                "csrfmiddlewaretoken": csrftoken,
            },
            headers={"Referer": f"{self.host}/api-auth/login/"},
            catch_response=True,
        ) as resp:
            if "sessionid" in self.client.cookies:
                resp.success()
            else:
                resp.failure(f"Login failed: {resp.status_code}")
                return

        artists = self.client.get(f"/api/v1/artists/?tenant_id={self.tenant_id}")
        if artists.status_code == 200:
            self.artist_ids = [a["id"] for a in artists.json()]
        works = self.client.get(f"/api/v1/works/?tenant_id={self.tenant_id}")
        if works.status_code == 200:
            self.work_ids = [w["id"] for w in works.json()]

    @task(3)
    def tenant_analytics(self):
        self.client.get(f"/api/v1/analytics/tenants/{self.tenant_id}/", name="/api/v1/analytics/tenants/[id]/")

    @task(3)
    def artist_analytics(self):
        if self.artist_ids:
            artist_id = random.choice(self.artist_ids)
            self.client.get(f"/api/v1/analytics/artists/{artist_id}/", name="/api/v1/analytics/artists/[id]/")

    @task(2)
    def work_splits(self):
        if self.work_ids:
            work_id = random.choice(self.work_ids)
            self.client.get(f"/api/v1/works/{work_id}/splits/", name="/api/v1/works/[id]/splits/")

    @task(1)
    def royalty_reports(self):
        self.client.get(f"/api/v1/royalty-reports/?tenant_id={self.tenant_id}", name="/api/v1/royalty-reports/")

    @task(1)
    def quota(self):
        self.client.get(f"/api/v1/tenants/{self.tenant_id}/quota/works/", name="/api/v1/tenants/[id]/quota/works/")


# Seed first with `manage.py seed_label_data`, then:
# `locust --headless -u 50 -r 5 -t 2m -f locustfile.py --csv out --host http://localhost:8070`
