"""
Declares the command-line arguments of a router reconnect tool.

Run with e.g.:
    python examples/router_args.py pu alice pp secret
    python examples/router_args.py --h=10.0.0.1 --pu alice --pp secret
"""
import sys

from dotargs import Argument, ArgumentRegistry

USAGE_HINT = "exp:\n  router_args h RouterIP ru RouterUser rp RouterPwd pu PPPoEUser pp PPPoEPwd"


def build_registry() -> ArgumentRegistry:
    registry = ArgumentRegistry(
        application_info="SmartRouter: switch the WAN PPPoE account of a router",
        executable_name="router_args",
    )
    registry.register_argument("h", Argument.option("192.168.1.1", help="Router address."))
    registry.register_argument("ru", Argument.option("root", help="Router user."))
    registry.register_argument("rp", Argument.option("root", help="Router password."))
    registry.register_argument("pu", Argument.option(required=True, help="PPPoE user."))
    registry.register_argument("pp", Argument.option(required=True, help="PPPoE password."))
    registry.register_help_argument()
    registry.add_example("Switch account", "router_args pu alice pp secret")
    return registry


def main() -> int:
    registry = build_registry()
    result = registry.validate(sys.argv[1:])
    if not result:
        for error in result.errors:
            print(error)
        print(USAGE_HINT)
        return 1
    registry.process()

    print(f"Host : {registry.get_value('h', str)}")
    print(f"Username : {registry.get_value('ru', str)}")
    print(f"Password : {registry.get_value('rp', str)}")
    print(f"PPPoEUser : {registry.get_value('pu', str)}")
    print(f"PPPoEPwd : {registry.get_value('pp', str)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
