from analytics_hub.models.types import ScriptOptions
from analytics_hub.page.document import CommandQueue, Page


class TestLoadScript:
    def test_fragment_uses_page_protocol(self):
        page = Page("https://shop.example.com/")
        tag = page.load_script("//cdn.example.com/lib.js")
        assert tag.src == "https://cdn.example.com/lib.js"
        assert tag.is_async is True

    def test_protocol_specific_urls(self):
        options = ScriptOptions(http="http://a.example.com/x.js", https="https://b.example.com/x.js")
        assert Page("http://shop.example.com/").load_script(options).src == "http://a.example.com/x.js"
        assert Page("https://shop.example.com/").load_script(options).src == "https://b.example.com/x.js"

    def test_id_and_attributes(self):
        page = Page("https://shop.example.com/")
        tag = page.load_script(
            ScriptOptions(fragment="//cdn.example.com/t.js", id="tracker", attributes={"data-site-id": "s1"})
        )
        assert tag.id == "tracker"
        assert tag.attributes == {"data-site-id": "s1"}

    def test_new_scripts_go_first(self):
        page = Page("https://shop.example.com/")
        page.load_script("//cdn.example.com/first.js")
        page.load_script("//cdn.example.com/second.js")
        assert [s.src for s in page.scripts] == [
            "https://cdn.example.com/second.js",
            "https://cdn.example.com/first.js",
        ]


class TestQueue:
    def test_queue_is_created_once(self):
        page = Page()
        assert page.queue("_kmq") is page.queue("_kmq")

    def test_existing_global_list_is_kept(self):
        page = Page()
        page.globals["_gaq"] = [["_setAccount", "UA-1"]]
        queue = page.queue("_gaq")
        assert isinstance(queue, CommandQueue)
        assert queue == [["_setAccount", "UA-1"]]

    def test_push_and_call(self):
        queue = CommandQueue()
        queue.push(["record", "Signed Up"], ["set", {"plan": "free"}])
        queue.call("identify", "user-1")
        assert queue == [["record", "Signed Up"], ["set", {"plan": "free"}], ["identify", "user-1"]]


class TestNavigate:
    def test_relative_navigation_updates_location(self):
        page = Page("https://shop.example.com/landing")
        page.navigate("/pricing?plan=pro")
        assert page.location.href == "https://shop.example.com/pricing?plan=pro"
        assert page.location.search == "?plan=pro"
        assert page.history == ["https://shop.example.com/pricing?plan=pro"]
