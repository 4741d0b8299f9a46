from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .client import Mandrill


def _compact(**params: Any) -> dict[str, Any]:
    return {k: v for k, v in params.items() if v is not None}


class _Resource:
    group = ""

    def __init__(self, master: Mandrill):
        self.master = master

    def _call(self, method: str, **params: Any) -> Any:
        return self.master.call(f"{self.group}/{method}", _compact(**params))


class Users(_Resource):
    group = "users"

    def info(self) -> dict[str, Any]:
        return self._call("info")

    def ping(self) -> str:
        return self._call("ping")

    def ping2(self) -> dict[str, Any]:
        return self._call("ping2")

    def senders(self) -> list[dict[str, Any]]:
        return self._call("senders")


class Messages(_Resource):
    group = "messages"

    def send(
            self,
            message: dict[str, Any],
            *,
            async_: bool = False,
            ip_pool: str | None = None,
            send_at: str | None = None,
    ) -> list[dict[str, Any]]:
        return self._call("send", message=message, ip_pool=ip_pool, send_at=send_at, **{"async": async_})

    def send_template(
            self,
            template_name: str,
            template_content: list[dict[str, Any]],
            message: dict[str, Any],
            *,
            async_: bool = False,
            ip_pool: str | None = None,
            send_at: str | None = None,
    ) -> list[dict[str, Any]]:
        return self._call(
            "send-template",
            template_name=template_name,
            template_content=template_content,
            message=message,
            ip_pool=ip_pool,
            send_at=send_at,
            **{"async": async_},
        )

    def search(
            self,
            query: str = "*",
            *,
            date_from: str | None = None,
            date_to: str | None = None,
            tags: list[str] | None = None,
            senders: list[str] | None = None,
            api_keys: list[str] | None = None,
            limit: int = 100,
    ) -> list[dict[str, Any]]:
        return self._call(
            "search",
            query=query,
            date_from=date_from,
            date_to=date_to,
            tags=tags,
            senders=senders,
            api_keys=api_keys,
            limit=int(limit),
        )

    def search_time_series(
            self,
            query: str = "*",
            *,
            date_from: str | None = None,
            date_to: str | None = None,
            tags: list[str] | None = None,
            senders: list[str] | None = None,
    ) -> list[dict[str, Any]]:
        return self._call(
            "search-time-series",
            query=query,
            date_from=date_from,
            date_to=date_to,
            tags=tags,
            senders=senders,
        )

    def info(self, id: str) -> dict[str, Any]:
        return self._call("info", id=id)

    def content(self, id: str) -> dict[str, Any]:
        return self._call("content", id=id)

    def parse(self, raw_message: str) -> dict[str, Any]:
        return self._call("parse", raw_message=raw_message)

    def send_raw(
            self,
            raw_message: str,
            *,
            from_email: str | None = None,
            from_name: str | None = None,
            to: list[str] | None = None,
            async_: bool = False,
            ip_pool: str | None = None,
            send_at: str | None = None,
            return_path_domain: str | None = None,
    ) -> list[dict[str, Any]]:
        return self._call(
            "send-raw",
            raw_message=raw_message,
            from_email=from_email,
            from_name=from_name,
            to=to,
            ip_pool=ip_pool,
            send_at=send_at,
            return_path_domain=return_path_domain,
            **{"async": async_},
        )

    def list_scheduled(self, *, to: str | None = None) -> list[dict[str, Any]]:
        return self._call("list-scheduled", to=to)

    def cancel_scheduled(self, id: str) -> dict[str, Any]:
        return self._call("cancel-scheduled", id=id)

    def reschedule(self, id: str, send_at: str) -> dict[str, Any]:
        return self._call("reschedule", id=id, send_at=send_at)


class Templates(_Resource):
    group = "templates"

    def add(
            self,
            name: str,
            *,
            from_email: str | None = None,
            from_name: str | None = None,
            subject: str | None = None,
            code: str | None = None,
            text: str | None = None,
            publish: bool = True,
            labels: list[str] | None = None,
    ) -> dict[str, Any]:
        return self._call(
            "add",
            name=name,
            from_email=from_email,
            from_name=from_name,
            subject=subject,
            code=code,
            text=text,
            publish=bool(publish),
            labels=labels,
        )

    def info(self, name: str) -> dict[str, Any]:
        return self._call("info", name=name)

    def update(
            self,
            name: str,
            *,
            from_email: str | None = None,
            from_name: str | None = None,
            subject: str | None = None,
            code: str | None = None,
            text: str | None = None,
            publish: bool = True,
            labels: list[str] | None = None,
    ) -> dict[str, Any]:
        return self._call(
            "update",
            name=name,
            from_email=from_email,
            from_name=from_name,
            subject=subject,
            code=code,
            text=text,
            publish=bool(publish),
            labels=labels,
        )

    def publish(self, name: str) -> dict[str, Any]:
        return self._call("publish", name=name)

    def delete(self, name: str) -> dict[str, Any]:
        return self._call("delete", name=name)

    def list(self, *, label: str | None = None) -> list[dict[str, Any]]:
        return self._call("list", label=label)

    def time_series(self, name: str) -> list[dict[str, Any]]:
        return self._call("time-series", name=name)

    def render(
            self,
            template_name: str,
            template_content: list[dict[str, Any]],
            *,
            merge_vars: list[dict[str, Any]] | None = None,
    ) -> dict[str, Any]:
        return self._call(
            "render",
            template_name=template_name,
            template_content=template_content,
            merge_vars=merge_vars,
        )


class Tags(_Resource):
    group = "tags"

    def list(self) -> list[dict[str, Any]]:
        return self._call("list")

    def delete(self, tag: str) -> dict[str, Any]:
        return self._call("delete", tag=tag)

    def info(self, tag: str) -> dict[str, Any]:
        return self._call("info", tag=tag)

    def time_series(self, tag: str) -> list[dict[str, Any]]:
        return self._call("time-series", tag=tag)

    def all_time_series(self) -> list[dict[str, Any]]:
        return self._call("all-time-series")


class Rejects(_Resource):
    group = "rejects"

    def add(self, email: str, *, comment: str | None = None, subaccount: str | None = None) -> dict[str, Any]:
        return self._call("add", email=email, comment=comment, subaccount=subaccount)

    def list(
            self,
            *,
            email: str | None = None,
            include_expired: bool = False,
            subaccount: str | None = None,
    ) -> list[dict[str, Any]]:
        return self._call("list", email=email, include_expired=bool(include_expired), subaccount=subaccount)

    def delete(self, email: str, *, subaccount: str | None = None) -> dict[str, Any]:
        return self._call("delete", email=email, subaccount=subaccount)


class Whitelists(_Resource):
    group = "whitelists"

    def add(self, email: str, *, comment: str | None = None) -> dict[str, Any]:
        return self._call("add", email=email, comment=comment)

    def list(self, *, email: str | None = None) -> list[dict[str, Any]]:
        return self._call("list", email=email)

    def delete(self, email: str) -> dict[str, Any]:
        return self._call("delete", email=email)


class Senders(_Resource):
    group = "senders"

    def list(self) -> list[dict[str, Any]]:
        return self._call("list")

    def domains(self) -> list[dict[str, Any]]:
        return self._call("domains")

    def add_domain(self, domain: str) -> dict[str, Any]:
        return self._call("add-domain", domain=domain)

    def check_domain(self, domain: str) -> dict[str, Any]:
        return self._call("check-domain", domain=domain)

    def verify_domain(self, domain: str, mailbox: str) -> dict[str, Any]:
        return self._call("verify-domain", domain=domain, mailbox=mailbox)

    def info(self, address: str) -> dict[str, Any]:
        return self._call("info", address=address)

    def time_series(self, address: str) -> list[dict[str, Any]]:
        return self._call("time-series", address=address)


class Urls(_Resource):
    group = "urls"

    def list(self) -> list[dict[str, Any]]:
        return self._call("list")

    def search(self, q: str) -> list[dict[str, Any]]:
        return self._call("search", q=q)

    def time_series(self, url: str) -> list[dict[str, Any]]:
        return self._call("time-series", url=url)

    def tracking_domains(self) -> list[dict[str, Any]]:
        return self._call("tracking-domains")

    def add_tracking_domain(self, domain: str) -> dict[str, Any]:
        return self._call("add-tracking-domain", domain=domain)

    def check_tracking_domain(self, domain: str) -> dict[str, Any]:
        return self._call("check-tracking-domain", domain=domain)


class Webhooks(_Resource):
    group = "webhooks"

    def list(self) -> list[dict[str, Any]]:
        return self._call("list")

    def add(self, url: str, *, description: str | None = None, events: list[str] | None = None) -> dict[str, Any]:
        return self._call("add", url=url, description=description, events=events)

    def info(self, id: int) -> dict[str, Any]:
        return self._call("info", id=int(id))

    def update(
            self,
            id: int,
            url: str,
            *,
            description: str | None = None,
            events: list[str] | None = None,
    ) -> dict[str, Any]:
        return self._call("update", id=int(id), url=url, description=description, events=events)

    def delete(self, id: int) -> dict[str, Any]:
        return self._call("delete", id=int(id))


class Subaccounts(_Resource):
    group = "subaccounts"

    def list(self, *, q: str | None = None) -> list[dict[str, Any]]:
        return self._call("list", q=q)

    def add(
            self,
            id: str,
            *,
            name: str | None = None,
            notes: str | None = None,
            custom_quota: int | None = None,
    ) -> dict[str, Any]:
        return self._call("add", id=id, name=name, notes=notes, custom_quota=custom_quota)

    def info(self, id: str) -> dict[str, Any]:
        return self._call("info", id=id)

    def update(
            self,
            id: str,
            *,
            name: str | None = None,
            notes: str | None = None,
            custom_quota: int | None = None,
    ) -> dict[str, Any]:
        return self._call("update", id=id, name=name, notes=notes, custom_quota=custom_quota)

    def delete(self, id: str) -> dict[str, Any]:
        return self._call("delete", id=id)

    def pause(self, id: str) -> dict[str, Any]:
        return self._call("pause", id=id)

    def resume(self, id: str) -> dict[str, Any]:
        return self._call("resume", id=id)


class Inbound(_Resource):
    group = "inbound"

    def domains(self) -> list[dict[str, Any]]:
        return self._call("domains")

    def add_domain(self, domain: str) -> dict[str, Any]:
        return self._call("add-domain", domain=domain)

    def check_domain(self, domain: str) -> dict[str, Any]:
        return self._call("check-domain", domain=domain)

    def delete_domain(self, domain: str) -> dict[str, Any]:
        return self._call("delete-domain", domain=domain)

    def routes(self, domain: str) -> list[dict[str, Any]]:
        return self._call("routes", domain=domain)

    def add_route(self, domain: str, pattern: str, url: str) -> dict[str, Any]:
        return self._call("add-route", domain=domain, pattern=pattern, url=url)

    def update_route(self, id: str, *, pattern: str | None = None, url: str | None = None) -> dict[str, Any]:
        return self._call("update-route", id=id, pattern=pattern, url=url)

    def delete_route(self, id: str) -> dict[str, Any]:
        return self._call("delete-route", id=id)

    def send_raw(
            self,
            raw_message: str,
            *,
            to: list[str] | None = None,
            mail_from: str | None = None,
            helo: str | None = None,
            client_address: str | None = None,
    ) -> list[dict[str, Any]]:
        return self._call(
            "send-raw",
            raw_message=raw_message,
            to=to,
            mail_from=mail_from,
            helo=helo,
            client_address=client_address,
        )


class Exports(_Resource):
    group = "exports"

    def info(self, id: str) -> dict[str, Any]:
        return self._call("info", id=id)

    def list(self) -> list[dict[str, Any]]:
        return self._call("list")

    def rejects(self, *, notify_email: str | None = None) -> dict[str, Any]:
        return self._call("rejects", notify_email=notify_email)

    def whitelist(self, *, notify_email: str | None = None) -> dict[str, Any]:
        return self._call("whitelist", notify_email=notify_email)

    def activity(
            self,
            *,
            notify_email: str | None = None,
            date_from: str | None = None,
            date_to: str | None = None,
            tags: list[str] | None = None,
            senders: list[str] | None = None,
            states: list[str] | None = None,
            api_keys: list[str] | None = None,
    ) -> dict[str, Any]:
        return self._call(
            "activity",
            notify_email=notify_email,
            date_from=date_from,
            date_to=date_to,
            tags=tags,
            senders=senders,
            states=states,
            api_keys=api_keys,
        )


class Ips(_Resource):
    group = "ips"

    def list(self) -> list[dict[str, Any]]:
        return self._call("list")

    def info(self, ip: str) -> dict[str, Any]:
        return self._call("info", ip=ip)

    def provision(self, *, warmup: bool = False, pool: str | None = None) -> dict[str, Any]:
        return self._call("provision", warmup=bool(warmup), pool=pool)

    def start_warmup(self, ip: str) -> dict[str, Any]:
        return self._call("start-warmup", ip=ip)

    def cancel_warmup(self, ip: str) -> dict[str, Any]:
        return self._call("cancel-warmup", ip=ip)

    def set_pool(self, ip: str, pool: str, *, create_pool: bool = False) -> dict[str, Any]:
        return self._call("set-pool", ip=ip, pool=pool, create_pool=bool(create_pool))

    def delete(self, ip: str) -> dict[str, Any]:
        return self._call("delete", ip=ip)

    def list_pools(self) -> list[dict[str, Any]]:
        return self._call("list-pools")

    def pool_info(self, pool: str) -> dict[str, Any]:
        return self._call("pool-info", pool=pool)

    def create_pool(self, pool: str) -> dict[str, Any]:
        return self._call("create-pool", pool=pool)

    def delete_pool(self, pool: str) -> dict[str, Any]:
        return self._call("delete-pool", pool=pool)

    def check_custom_dns(self, ip: str, domain: str) -> dict[str, Any]:
        return self._call("check-custom-dns", ip=ip, domain=domain)

    def set_custom_dns(self, ip: str, domain: str) -> dict[str, Any]:
        return self._call("set-custom-dns", ip=ip, domain=domain)


class Metadata(_Resource):
    group = "metadata"

    def list(self) -> list[dict[str, Any]]:
        return self._call("list")

    def add(self, name: str, *, view_template: str | None = None) -> dict[str, Any]:
        return self._call("add", name=name, view_template=view_template)

    def update(self, name: str, view_template: str) -> dict[str, Any]:
        return self._call("update", name=name, view_template=view_template)

    def delete(self, name: str) -> dict[str, Any]:
        return self._call("delete", name=name)
