"""Tests for the Flask routes."""

import threading

import main


def use_array(client, text="5, 3, 8, 1"):
    return client.post("/api/array/import", json={"text": text})


class TestPages:
    def test_index(self, client):
        res = client.get("/")
        assert res.status_code == 200
        assert b"<svg" in res.data
        assert b"algo-selector" in res.data

    def test_catalog(self, client):
        data = client.get("/api/algorithms").get_json()
        keys = [a["key"] for a in data["algorithms"]]
        assert keys[0] == "bubbleSort"
        assert len(keys) == 7


class TestConfig:
    def test_unknown_algorithm_404(self, client):
        res = client.post("/api/config/algo", json={"algo_key": "bogoSort"})
        assert res.status_code == 404
        assert "error" in res.get_json()

    def test_select_algorithm(self, client):
        res = client.post("/api/config/algo", json={"algo_key": "binarySearch"})
        assert res.status_code == 200
        assert client.get("/api/state").get_json()["selected_algo"] == "binarySearch"

    def test_bad_target(self, client):
        assert client.post("/api/config/target", json={"target": "x"}).status_code == 400

    def test_speed_slider(self, client):
        use_array(client)
        client.post("/api/run")
        client.post("/api/config/speed", json={"speed": 200})
        run = client.get("/api/state").get_json()["run"]
        assert run["speed"] == 0.001


class TestArrays:
    def test_import(self, client):
        res = use_array(client)
        assert res.get_json()["array"] == [5, 3, 8, 1]

    def test_import_rejects_garbage(self, client):
        res = use_array(client, "1, banana")
        assert res.status_code == 400
        assert "banana" in res.get_json()["error"]

    def test_generate_clamps_size(self, client):
        data = client.post("/api/array/generate", json={"size": 3, "seed": 1}).get_json()
        assert len(data["array"]) == 10

    def test_import_rejects_oversized_array(self, client):
        text = " ".join(["7"] * (main.app.config["MAX_ARRAY_SIZE"] + 1))
        res = use_array(client, text)
        assert res.status_code == 400
        assert "At most 150" in res.get_json()["error"]
        assert client.get("/api/state").get_json()["array"] != [7] * 151

    def test_import_accepts_max_size(self, client):
        res = use_array(client, " ".join(["7"] * 150))
        assert res.status_code == 200
        assert len(res.get_json()["array"]) == 150

    def test_generate_rejects_bad_seed(self, client):
        for seed in ([1, 2], {"a": 1}, "abc", True):
            res = client.post("/api/array/generate", json={"size": 10, "seed": seed})
            assert res.status_code == 400
            assert "Seed" in res.get_json()["error"]

    def test_generate_seed_reproducible(self, client):
        a = client.post("/api/array/generate", json={"size": 12, "seed": 7}).get_json()["array"]
        b = client.post("/api/array/generate", json={"size": 12, "seed": 7}).get_json()["array"]
        assert a == b


class TestRunAndStep:
    def test_step_before_run(self, client):
        assert client.post("/api/step/next").status_code == 400

    def test_linear_search_run(self, client):
        use_array(client)
        client.post("/api/config/algo", json={"algo_key": "linearSearch"})
        client.post("/api/config/target", json={"target": 8})

        data = client.post("/api/run").get_json()
        assert data["total_steps"] == 4
        assert data["current_step"] == 0
        assert data["step"]["highlight"] == [0]

        data = client.post("/api/step/end").get_json()
        assert data["step"]["sorted"] == [2]
        assert data["state"] == "finished"

        res = client.post("/api/step/next")
        assert res.status_code == 400

    def test_navigation_and_counters(self, client):
        use_array(client, "3 2 1")
        client.post("/api/run")

        data = client.post("/api/step/goto", json={"index": 3}).get_json()
        assert (data["comparisons"], data["swaps"]) == (2, 4)

        data = client.post("/api/step/prev").get_json()
        assert data["current_step"] == 2

        data = client.post("/api/step/reset").get_json()
        assert data["current_step"] == 0
        assert data["comparisons"] == 0
        assert data["total_steps"] == 7

    def test_goto_invalid(self, client):
        use_array(client)
        client.post("/api/run")
        assert client.post("/api/step/goto", json={"index": 999}).status_code == 400

    def test_play_toggle(self, client):
        use_array(client)
        client.post("/api/run")
        assert client.post("/api/step/play").get_json()["state"] == "playing"
        assert client.post("/api/step/play").get_json()["state"] == "paused"

    def test_new_array_discards_run(self, client):
        use_array(client)
        client.post("/api/run")
        use_array(client, "9 8")
        assert client.get("/api/state").get_json()["run"] is None


class TestCompare:
    def test_compare_two_sorts(self, client):
        use_array(client, "5 4 3 2 1")
        data = client.post("/api/compare", json={"left": "bubbleSort", "right": "insertionSort"}).get_json()
        assert data["left"]["algo_key"] == "bubbleSort"
        assert data["winners"]["swaps"] == "Insertion Sort"

    def test_compare_unknown(self, client):
        res = client.post("/api/compare", json={"left": "bubbleSort", "right": "nope"})
        assert res.status_code == 404


class TestRunStore:
    def test_oldest_runs_evicted(self, client, monkeypatch):
        monkeypatch.setitem(main.app.config, "MAX_RUNS", 3)
        use_array(client)
        client.post("/api/run")

        for _ in range(5):
            other = main.app.test_client()
            use_array(other)
            other.post("/api/run")
            assert len(main.RUNS) <= 3

        assert len(main.RUNS) == 3
        # the first session's run was the least recently used
        assert client.get("/api/state").get_json()["run"] is None
        assert client.post("/api/step/next").status_code == 400

    def test_recent_access_survives_eviction(self, client, monkeypatch):
        monkeypatch.setitem(main.app.config, "MAX_RUNS", 2)
        a, b = main.app.test_client(), main.app.test_client()
        use_array(client)
        client.post("/api/run")
        use_array(a)
        a.post("/api/run")

        client.post("/api/step/next")
        use_array(b)
        b.post("/api/run")

        assert client.get("/api/state").get_json()["run"]["current_step"] == 1
        assert a.get("/api/state").get_json()["run"] is None

    def test_step_waits_for_run_lock(self, client):
        other = main.app.test_client()
        use_array(other)
        other.post("/api/run")
        stepper = next(iter(main.RUNS.values()))
        results = []

        with stepper.lock:
            worker = threading.Thread(
                target=lambda: results.append(other.post("/api/step/next").status_code))
            worker.start()
            worker.join(timeout=0.2)
            assert worker.is_alive()
            assert stepper.current_idx == 0

        worker.join(timeout=5)
        assert results == [200]
        assert stepper.current_idx == 1
